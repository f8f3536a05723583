from types import TracebackType
from typing import Optional
from request_execution.models import TransportRequest, TransportResponse
from request_execution.transport.base import TransportEngine


class FakeTransportEngine(TransportEngine):
    def __init__(self, response: TransportResponse):
        self.response = response
        self.last_request: Optional[TransportRequest] = None
        self.opened = False
        self.closed = False

    async def __aenter__(self):
        self.opened = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.closed = True

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.last_request = request
        return self.response


def sample_transport_response() -> TransportResponse:
    return TransportResponse(
        status=200,
        headers={"Content-Type": "application/json"},
        body=b"{}",
        error=None,
    )


def failed_transport_response() -> TransportResponse:
    return TransportResponse(
        status=None,
        headers={},
        body=None,
        error="ConnectionTimeoutError: Connection timeout to host https://api.example.com/v1",
    )
