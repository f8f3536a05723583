from __future__ import annotations
import json
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Mapping


class RequestType(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass
class TransportRequest:
    """Low-level request handed to a TransportEngine."""
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    json: Any | None = None
    data: Any | None = None


@dataclass
class TransportResponse:
    """
    Low-level result of a TransportEngine.send call. A request that never
    produced an HTTP response has `status` None and `error` set. `headers`
    is a plain mapping: repeated header names keep their first value.
    """
    status: int | None
    headers: Mapping[str, str]
    body: bytes | None
    error: str | None = None


@dataclass
class RequestContext:
    """
    A container to hold metadata for a HTTP request.
    • method: HTTP request type - GET, POST, etc
    • url: path relative to the configured base URL, or an absolute URL
    • headers: Request headers
    • params: Query string parameters
    • json: Payload in JSON format
    • data: Payload sent as form or binary data
    • metadata: Metadata associated with the HTTP request
    """
    method: RequestType
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    json: Any | None = None
    data: Any | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def with_headers(self, new_headers: dict[str, str]) -> "RequestContext":
        """Return context with headers added"""
        self.headers = self.headers | new_headers
        return self


@dataclass
class RequestExchange:
    """
    Semantic record of a single HTTP request as seen by a test case. It is
    passed through the middleware chain and returned to the caller.
    • context: original RequestContext, possibly modified by middleware
    • status_code: HTTP status response code
    • headers: response headers, one value per name; a repeated header
      such as Set-Cookie keeps only its first value
    • body: raw response body (bytes), if any
    • success: False on transport errors and 5xx responses
    • error_message: error description
    • metadata: middleware annotations (timing, ...)
    """
    context: RequestContext
    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    success: bool = True
    error_message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str | None:
        if self.body is None:
            return None
        return self.body.decode("utf-8", errors="replace")

    def json_body(self) -> Any:
        if not self.body:
            return None
        return json.loads(self.body)
