from core.abstract_factory import TypeAbstractFactory
from core.exceptions import ConfigError
from core.logging import configure_logging

__all__ = [
    "TypeAbstractFactory",
    "ConfigError",
    "configure_logging",
]
