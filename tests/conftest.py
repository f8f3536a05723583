from tests.fixtures.configs.execution import (
    default_execution_config,
    fast_timeout_config,
    clean_environ,
)

__all__ = [
    'default_execution_config',
    'fast_timeout_config',
    'clean_environ',
]
