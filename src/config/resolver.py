import logging
import os
from typing import Any, Mapping
from pydantic import ValidationError

from config.models.execution import ExecutionConfig
from core.exceptions import ConfigError


logger = logging.getLogger(__name__)

# environment / override key -> ExecutionConfig field
SETTING_KEYS: dict[str, str] = {
    "BASE_URL": "base_url",
    "CONNECT_TIMEOUT_MS": "connect_timeout_ms",
    "READ_TIMEOUT_MS": "read_timeout_ms",
}


class ConfigResolver:
    """
    Resolve an ExecutionConfig from explicit overrides, the process
    environment and compiled defaults, in that order of precedence.

    The resolver holds no state beyond the environment mapping it reads; the
    same inputs always produce value-equal configs.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def resolve(self, overrides: Mapping[str, Any] | None = None) -> ExecutionConfig:
        overrides = overrides or {}

        unknown = sorted(set(overrides) - set(SETTING_KEYS))
        if unknown:
            raise ConfigError(
                f"Unknown setting(s) {unknown}; expected any of {sorted(SETTING_KEYS)}",
                key=unknown[0],
                value=overrides[unknown[0]],
            )

        values: dict[str, Any] = {}
        for key, field_name in SETTING_KEYS.items():
            if key in overrides:
                values[field_name] = overrides[key]
                logger.debug("%s taken from override", key)
            elif key in self.environ:
                values[field_name] = self.environ[key]
                logger.debug("%s taken from environment", key)

        try:
            config = ExecutionConfig.model_validate(values)
        except ValidationError as e:
            raise self._to_config_error(e, values) from e

        logger.info(
            "Resolved execution config: base_url=%s connect_timeout_ms=%d read_timeout_ms=%d",
            config.base_url,
            config.connect_timeout_ms,
            config.read_timeout_ms,
        )
        return config

    @staticmethod
    def _to_config_error(error: ValidationError, values: dict[str, Any]) -> ConfigError:
        first = error.errors()[0]
        field_name = str(first["loc"][0]) if first["loc"] else None
        key = next((k for k, f in SETTING_KEYS.items() if f == field_name), field_name)
        return ConfigError(
            f"Invalid {key}={values.get(field_name)!r}: {first['msg']}",
            key=key,
            value=values.get(field_name),
        )


def resolve(
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> ExecutionConfig:
    return ConfigResolver(environ).resolve(overrides)
