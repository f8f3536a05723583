from __future__ import annotations
import os
import re
from abc import ABC, abstractmethod
from typing import Mapping, TypeAlias

from core.exceptions import ConfigError


ConfigScalar: TypeAlias = str | int | float | bool | None
ConfigValue: TypeAlias = (
    ConfigScalar | dict[str, "ConfigValue"] | list["ConfigValue"]
)


class ConfigPreprocessor(ABC):
    """
    Transforms raw settings structures (dict/list/scalar) BEFORE validation.

    Examples:
        - Resolve ${ENV_VAR} placeholders
        - Apply overlays (base.yaml + env.yaml)
    """

    @abstractmethod
    def process(self, data: ConfigValue) -> ConfigValue: ...


class EnvVarPreprocessor(ConfigPreprocessor):
    """
    Resolves ${NAME} and ${NAME:-default} placeholders from the environment.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ
        self._env_pattern = re.compile(
            r"\$\{\s*([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\s*\}"
        )

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _replace_env(self, s: str) -> str:
        def replace(m: re.Match) -> str:
            name, default = m.groups()
            if name in self.environ:
                return self.environ[name]
            if default is not None:
                return default
            raise ConfigError(
                f"Environment variable {name!r} referenced in settings is not set",
                key=name,
            )

        return self._env_pattern.sub(replace, s)

    def process(self, data: ConfigValue) -> ConfigValue:
        if isinstance(data, dict):
            return {k: self.process(v) for k, v in data.items()}

        if isinstance(data, list):
            return [self.process(v) for v in data]

        if isinstance(data, str):
            return self._replace_env(data)

        return data
