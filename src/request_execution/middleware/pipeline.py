from abc import ABC, abstractmethod
from enum import Enum
from functools import partial
from typing import Awaitable, Callable, Iterable

from request_execution.models import RequestExchange
from core.abstract_factory import TypeAbstractFactory


NEXT_CALL = Callable[[RequestExchange], Awaitable[RequestExchange]]
# middleware receive the downstream handler as the `next_call` keyword
MIDDLEWARE_FUNC = Callable[..., Awaitable[RequestExchange]]


class MiddlewareType(str, Enum):
    LOGGING = "logging"
    TIMING = "timing"


class Middleware(ABC):
    """Observer wrapped around a single request dispatch."""

    @abstractmethod
    async def __call__(
        self,
        request_exchange: RequestExchange,
        next_call: NEXT_CALL,
    ) -> RequestExchange:
        ...


class MiddlewareFactory(TypeAbstractFactory[MiddlewareType, Middleware]):
    pass


class MiddlewarePipeline:
    """
    Ordered middleware around a terminal handler. The first middleware
    added is the outermost; any of them may return without calling
    `next_call` to skip the rest of the chain.
    """

    def __init__(self, middleware: Iterable[MIDDLEWARE_FUNC] = ()) -> None:
        self._middleware_list: list[MIDDLEWARE_FUNC] = list(middleware)

    def __len__(self) -> int:
        return len(self._middleware_list)

    def add(self, middleware: MIDDLEWARE_FUNC) -> None:
        self._middleware_list.append(middleware)

    def wrap(self, terminal_handler: NEXT_CALL) -> NEXT_CALL:
        """Bind the chain around `terminal_handler`, innermost first."""
        handler = terminal_handler
        for middleware in reversed(self._middleware_list):
            handler = partial(middleware, next_call=handler)
        return handler

    async def execute(
        self,
        initial: RequestExchange,
        terminal_handler: NEXT_CALL,
    ) -> RequestExchange:
        return await self.wrap(terminal_handler)(initial)
