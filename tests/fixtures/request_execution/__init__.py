from .executor import basic_request_context
from .middleware import (
    base_exchange,
    terminal_handler_ok,
    terminal_handler_fail,
)
from .transport import (
    FakeTransportEngine,
    sample_transport_response,
    failed_transport_response,
)


__all__ = [
    'basic_request_context',
    'base_exchange',
    'terminal_handler_ok',
    'terminal_handler_fail',
    'FakeTransportEngine',
    'sample_transport_response',
    'failed_transport_response',
]
