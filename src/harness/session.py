import logging
from types import TracebackType
from typing import Any, Callable, Iterable
from typing_extensions import Self

from config.models.execution import ExecutionConfig
from request_execution.executor import RequestExecutor
from request_execution.models import RequestContext, RequestExchange, RequestType
from request_execution.middleware.pipeline import MIDDLEWARE_FUNC, MiddlewareFactory, MiddlewareType
from request_execution.transport.base import TransportEngine, TransportEngineType
from request_execution.transport.engine import TransportEngineFactory


DEFAULT_MIDDLEWARE = (MiddlewareType.LOGGING, MiddlewareType.TIMING)


def _middleware_factory(middleware_type: MiddlewareType) -> Callable[[], MIDDLEWARE_FUNC]:

    def factory() -> MIDDLEWARE_FUNC:
        return MiddlewareFactory.create(middleware_type)

    return factory


class HarnessSession:
    """
    Wires an ExecutionConfig to a transport engine and a RequestExecutor for
    the duration of an `async with` block.

    The config is only read, so any number of sessions may share one
    instance. A session belongs to the event loop that opened it.
    """

    def __init__(
        self,
        config: ExecutionConfig,
        engine_type: TransportEngineType = TransportEngineType.AIOHTTP,
        middleware: Iterable[MiddlewareType] = DEFAULT_MIDDLEWARE,
    ) -> None:
        self.config = config
        self._engine_type = engine_type
        self._middleware = tuple(MiddlewareType(m) for m in middleware)
        self._transport: TransportEngine | None = None
        self._executor: RequestExecutor | None = None
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def executor(self) -> RequestExecutor:
        if self._executor is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        return self._executor

    async def __aenter__(self) -> Self:
        transport = TransportEngineFactory.create(
            self._engine_type, **self.config.to_runtime_args()
        )
        await transport.__aenter__()
        self._transport = transport
        self._executor = RequestExecutor(
            transport,
            middleware_factories=[_middleware_factory(m) for m in self._middleware],
        )
        self._logger.debug(
            "Opened %s session against %s", self._engine_type.value, self.config.base_url
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        transport, self._transport, self._executor = self._transport, None, None
        if transport is not None:
            await transport.__aexit__(exc_type, exc_val, exc_tb)

    async def send(self, context: RequestContext) -> RequestExchange:
        return await self.executor.send(context)

    async def request(
        self,
        method: RequestType | str,
        url: str,
        **kwargs: Any,
    ) -> RequestExchange:
        """Shorthand for `send(RequestContext(method, url, **kwargs))`."""
        if not isinstance(method, RequestType):
            method = RequestType(method.upper())
        context = RequestContext(method=method, url=url, **kwargs)
        return await self.send(context)
