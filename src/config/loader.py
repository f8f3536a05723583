import json
import yaml
from typing import Any, Callable
from pathlib import Path

from config.models.execution import ExecutionConfig
from config.preprocessor import ConfigPreprocessor, ConfigValue
from config.resolver import SETTING_KEYS, ConfigResolver
from core.exceptions import ConfigError


class ConfigLoader:
    """
    Load + preprocess + resolve execution settings from YAML/JSON.

    - Documents are mappings keyed by ExecutionConfig field names.
    - Preprocessors run on raw data before validation.
    - Values become resolver overrides, so they win over the environment
      and are validated exactly like any other override.
    """

    def __init__(
        self,
        resolver: ConfigResolver | None = None,
        preprocessors: list[ConfigPreprocessor] | None = None,
    ):
        self._resolver = resolver or ConfigResolver()
        self._preprocessors = list(preprocessors or [])

    def add_preprocessor(self, preprocessor: ConfigPreprocessor) -> None:
        self._preprocessors.append(preprocessor)

    def from_yaml(self, source: str | Path) -> ExecutionConfig:
        data = self._load(source, parser=yaml.safe_load, error=yaml.YAMLError)
        return self._build(data)

    def from_json(self, source: str | Path) -> ExecutionConfig:
        data = self._load(source, parser=json.loads, error=json.JSONDecodeError)
        return self._build(data)

    def _load(
        self,
        source: str | Path,
        *,
        parser: Callable[[str], Any],
        error: type[Exception],
    ) -> ConfigValue:
        """
        Load settings from a file path or raw string, then parse.
        """
        text = self._read_source(source)
        try:
            return parser(text)
        except error as e:
            raise ConfigError(f"Could not parse settings: {e}") from e

    def _read_source(self, source: str | Path) -> str:
        """
        Read source as text.
        If `source` is a file path, read it.
        Otherwise treat it as raw content.
        """
        if isinstance(source, Path):
            return self._read_file(source)

        # string: path or raw content?
        p = Path(source)
        try:
            is_file = p.is_file()
        except OSError:
            # raw content too long or malformed to be a path
            is_file = False

        return self._read_file(p) if is_file else source

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            return path.read_text()
        except OSError as e:
            raise ConfigError(
                f"Could not read settings file {path}: {e}", key=str(path)
            ) from e

    def _build(self, data: ConfigValue) -> ExecutionConfig:
        """
        Apply preprocessors and resolve into an ExecutionConfig.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Settings document must be a mapping, got {type(data).__name__}"
            )

        for pre in self._preprocessors:
            data = pre.process(data)

        fields = {f: k for k, f in SETTING_KEYS.items()}
        unknown = sorted(set(data) - set(fields))
        if unknown:
            raise ConfigError(
                f"Unknown setting(s) {unknown}; expected any of {sorted(fields)}",
                key=unknown[0],
            )

        return self._resolver.resolve({fields[k]: v for k, v in data.items()})
