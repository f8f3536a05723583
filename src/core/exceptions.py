from typing import Any


class ConfigError(ValueError):
    """Raised when a supplied setting cannot be turned into a valid ExecutionConfig"""

    def __init__(self, message: str, *, key: str | None = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        super().__init__(message)
