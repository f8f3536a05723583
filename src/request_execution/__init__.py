from request_execution.executor import RequestExecutor
from request_execution.models import (
    RequestContext,
    RequestExchange,
    RequestType,
    TransportRequest,
    TransportResponse,
)
from request_execution.middleware.pipeline import (
    MIDDLEWARE_FUNC,
    NEXT_CALL,
    Middleware,
    MiddlewareFactory,
    MiddlewarePipeline,
    MiddlewareType,
)
from request_execution.middleware.listeners import (
    LoggingMiddleware,
    TimingMiddleware,
)
from request_execution.transport.base import TransportEngine, TransportEngineType
from request_execution.transport.engine import AiohttpEngine, TransportEngineFactory

__all__ = [
    "RequestExecutor",
    "RequestContext",
    "RequestExchange",
    "RequestType",
    "TransportRequest",
    "TransportResponse",
    "MIDDLEWARE_FUNC",
    "NEXT_CALL",
    "Middleware",
    "MiddlewareFactory",
    "MiddlewarePipeline",
    "MiddlewareType",
    "LoggingMiddleware",
    "TimingMiddleware",
    "TransportEngine",
    "TransportEngineType",
    "AiohttpEngine",
    "TransportEngineFactory",
]
