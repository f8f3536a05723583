from config.loader import ConfigLoader
from config.preprocessor import (
    ConfigPreprocessor,
    ConfigValue,
    EnvVarPreprocessor,
)
from config.resolver import SETTING_KEYS, ConfigResolver, resolve
from config.models.execution import (
    DEFAULT_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT_MS,
    DEFAULT_READ_TIMEOUT_MS,
    ExecutionConfig,
)

__all__ = [
    "ConfigLoader",
    "ConfigPreprocessor",
    "ConfigValue",
    "EnvVarPreprocessor",
    "SETTING_KEYS",
    "ConfigResolver",
    "resolve",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONNECT_TIMEOUT_MS",
    "DEFAULT_READ_TIMEOUT_MS",
    "ExecutionConfig",
]
