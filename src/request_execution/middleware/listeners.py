# Middleware components that observe but do not change the request or response
import logging
import time

from request_execution.models import RequestExchange
from request_execution.middleware.pipeline import (
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewareType
)


@MiddlewareFactory.register(MiddlewareType.LOGGING)
class LoggingMiddleware(Middleware):
    """
    Logs one line on the way in and one on the way out of the pipeline.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    async def __call__(self, request_exchange: RequestExchange, next_call: NEXT_CALL) -> RequestExchange:
        context = request_exchange.context
        self._logger.info("-> %s %s", context.method.value, context.url)

        result = await next_call(request_exchange)

        if result.status_code is not None:
            self._logger.info("<- %s %s", result.status_code, result.context.url)
        else:
            self._logger.warning("<- FAILED %s: %s", result.context.url, result.error_message)

        return result


@MiddlewareFactory.register(MiddlewareType.TIMING)
class TimingMiddleware(Middleware):
    """
    Measure the elapsed time for the downstream pipeline and store
    the timing info in RequestExchange.metadata["timing"]
    """

    async def __call__(self, request_exchange: RequestExchange, next_call: NEXT_CALL) -> RequestExchange:
        start = time.monotonic()
        result: RequestExchange = await next_call(request_exchange)
        duration = time.monotonic() - start

        timing = dict(result.metadata.get("timing", {}))
        timing["total_seconds"] = round(duration, 3)
        result.metadata["timing"] = timing
        return result
