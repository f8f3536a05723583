from typing import Callable

from request_execution.transport.base import TransportEngine
from request_execution.models import RequestContext, RequestExchange, TransportRequest
from request_execution.middleware.pipeline import MIDDLEWARE_FUNC, MiddlewarePipeline


class RequestExecutor:
    """
    Thin gateway between test code and the Transport layer. RequestExecutor
    is responsible for the following:
    • Owns and runs the middleware pipeline.
    • Translates a RequestContext into a TransportRequest.
    • Maps the TransportResponse back onto a RequestExchange.
    It never touches the network itself and never raises on a failed request;
    failures are reported on the returned exchange.
    """

    def __init__(
        self,
        transport: TransportEngine,
        middleware_factories: list[Callable[[], MIDDLEWARE_FUNC]] | None = None,
    ) -> None:
        self.transport = transport
        self._middleware_factories = middleware_factories or []

    async def send(self, context: RequestContext) -> RequestExchange:
        """
        Execute a single HTTP request defined by the RequestContext through
        the middleware pipeline and underlying Transport layer.
        """

        pipeline = MiddlewarePipeline(factory() for factory in self._middleware_factories)

        async def terminal(req: RequestExchange) -> RequestExchange:
            transport_request = TransportRequest(
                method=req.context.method.value,
                url=req.context.url,
                headers=req.context.headers,
                params=req.context.params,
                json=req.context.json,
                data=req.context.data,
            )
            transport_response = await self.transport.send(transport_request)

            req.status_code = transport_response.status
            req.headers = dict(transport_response.headers or {})
            req.body = transport_response.body

            if transport_response.error:
                req.success = False
                req.error_message = transport_response.error
            else:
                req.success = (
                    transport_response.status is not None
                    and transport_response.status < 500
                )

            return req

        initial = RequestExchange(context=context)
        return await pipeline.execute(initial, terminal)
