"""Unit tests for ConfigResolver"""
import pytest

from config.models.execution import DEFAULT_BASE_URL, ExecutionConfig
from config.resolver import ConfigResolver, resolve
from core.exceptions import ConfigError


@pytest.mark.unit
@pytest.mark.config
class TestResolveDefaults:
    """Tests for resolution with nothing supplied"""

    def test_no_override_uses_compiled_defaults(self):
        """
        GIVEN an empty environment and no overrides
        WHEN resolve is called
        THEN the compiled default origin and 5000ms timeouts are used
        """
        cfg = ConfigResolver(environ={}).resolve()

        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.connect_timeout_ms == 5000
        assert cfg.read_timeout_ms == 5000

    def test_reads_process_environment_by_default(self, clean_environ):
        """
        GIVEN BASE_URL exported in the process environment
        WHEN a resolver without an explicit environ resolves
        THEN the exported value is used
        """
        clean_environ.setenv("BASE_URL", "http://localhost:8080")

        assert ConfigResolver().resolve().base_url == "http://localhost:8080"

    def test_clean_process_environment_uses_defaults(self, clean_environ):
        assert resolve() == ExecutionConfig()


@pytest.mark.unit
@pytest.mark.config
class TestResolveOverrides:
    """Tests for BASE_URL and timeout overrides"""

    @pytest.mark.parametrize(
        "url",
        [
            "https://api.example.com/v1",
            "http://localhost:3000",
            "https://staging.example.org:8443/api/",
        ],
    )
    def test_valid_url_override_is_returned_unchanged(self, url):
        """
        GIVEN a syntactically valid URL as BASE_URL override
        WHEN resolve is called
        THEN base_url equals the supplied string
        """
        cfg = ConfigResolver(environ={}).resolve({"BASE_URL": url})

        assert cfg.base_url == url

    def test_end_to_end_environment_override(self):
        """
        GIVEN BASE_URL=https://api.example.com/v1 in the environment
        WHEN resolve is called
        THEN the full config carries that origin and default timeouts
        """
        cfg = resolve(environ={"BASE_URL": "https://api.example.com/v1"})

        assert cfg.model_dump() == {
            "base_url": "https://api.example.com/v1",
            "connect_timeout_ms": 5000,
            "read_timeout_ms": 5000,
        }

    def test_override_wins_over_environment(self):
        resolver = ConfigResolver(environ={"BASE_URL": "https://env.example.com"})

        cfg = resolver.resolve({"BASE_URL": "https://override.example.com"})

        assert cfg.base_url == "https://override.example.com"

    def test_timeouts_from_environment_strings(self):
        resolver = ConfigResolver(
            environ={"CONNECT_TIMEOUT_MS": "1500", "READ_TIMEOUT_MS": "30000"}
        )

        cfg = resolver.resolve()

        assert cfg.connect_timeout_ms == 1500
        assert cfg.read_timeout_ms == 30000
        assert cfg.base_url == DEFAULT_BASE_URL

    def test_unrelated_environment_is_ignored(self):
        cfg = ConfigResolver(environ={"HOME": "/root", "base_url": "nope"}).resolve()

        assert cfg == ExecutionConfig()


@pytest.mark.unit
@pytest.mark.config
class TestResolveErrors:
    """Tests for ConfigError on malformed input"""

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "",
            "example.com",
            "mailto:qa@example.com",
            " https://api.example.com/v1 ",
            "https://api.example.com/v1\n",
            "\thttps://api.example.com",
            "https://api.example.com/v1?key=x",
        ],
    )
    def test_invalid_url_override_raises(self, url):
        """
        GIVEN a non-URL string as BASE_URL override
        WHEN resolve is called
        THEN ConfigError is raised naming the key
        """
        with pytest.raises(ConfigError) as exc_info:
            ConfigResolver(environ={}).resolve({"BASE_URL": url})

        assert exc_info.value.key == "BASE_URL"
        assert exc_info.value.value == url
        assert "BASE_URL" in str(exc_info.value)

    def test_invalid_url_in_environment_raises(self):
        with pytest.raises(ConfigError, match="BASE_URL"):
            ConfigResolver(environ={"BASE_URL": "not a url"}).resolve()

    @pytest.mark.parametrize("value", ["-1", "soon", "1.5"])
    def test_invalid_timeout_raises(self, value):
        with pytest.raises(ConfigError) as exc_info:
            ConfigResolver(environ={"READ_TIMEOUT_MS": value}).resolve()

        assert exc_info.value.key == "READ_TIMEOUT_MS"

    def test_unknown_override_key_raises(self):
        with pytest.raises(ConfigError, match="Unknown setting"):
            ConfigResolver(environ={}).resolve({"BASEURL": "https://api.example.com"})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ConfigResolver(environ={}).resolve({"BASE_URL": "not a url"})


@pytest.mark.unit
@pytest.mark.config
class TestResolveIdempotence:
    """Repeated resolution with identical inputs"""

    def test_two_calls_are_value_equal(self):
        resolver = ConfigResolver(environ={"BASE_URL": "https://api.example.com/v1"})

        first = resolver.resolve()
        second = resolver.resolve()

        assert first == second
        assert first is not second

    def test_resolve_does_not_mutate_inputs(self):
        environ = {"BASE_URL": "https://api.example.com/v1"}
        overrides = {"READ_TIMEOUT_MS": 100}

        ConfigResolver(environ=environ).resolve(overrides)

        assert environ == {"BASE_URL": "https://api.example.com/v1"}
        assert overrides == {"READ_TIMEOUT_MS": 100}
