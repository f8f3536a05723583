"""
pytest plugin exposing the harness to a test suite.

Enable it from a conftest.py with ``pytest_plugins = ["harness.plugin"]``.
The execution config is resolved once, while pytest configures itself, so a
malformed BASE_URL stops the run before any test is collected.
"""
from typing import AsyncIterator

import pytest
import pytest_asyncio

from config.models.execution import ExecutionConfig
from config.resolver import ConfigResolver
from core.exceptions import ConfigError
from harness.session import HarnessSession


execution_config_key = pytest.StashKey[ExecutionConfig]()


def pytest_configure(config: pytest.Config) -> None:
    try:
        config.stash[execution_config_key] = ConfigResolver().resolve()
    except ConfigError as e:
        raise pytest.UsageError(f"Invalid harness configuration: {e}") from e


def pytest_report_header(config: pytest.Config) -> str:
    cfg = config.stash[execution_config_key]
    return (
        f"api harness: base_url={cfg.base_url} "
        f"connect_timeout_ms={cfg.connect_timeout_ms} read_timeout_ms={cfg.read_timeout_ms}"
    )


@pytest.fixture(scope="session")
def execution_config(pytestconfig: pytest.Config) -> ExecutionConfig:
    return pytestconfig.stash[execution_config_key]


@pytest_asyncio.fixture
async def harness_session(execution_config: ExecutionConfig) -> AsyncIterator[HarnessSession]:
    async with HarnessSession(execution_config) as session:
        yield session
