from typing import Any
from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


DEFAULT_BASE_URL = "https://api.cipla.stage.platform.leucinetech.com/v1"
DEFAULT_CONNECT_TIMEOUT_MS = 5000
DEFAULT_READ_TIMEOUT_MS = 5000

_http_url = TypeAdapter(AnyHttpUrl)


def _ms_to_seconds(value: int) -> float | None:
    # aiohttp treats None as "no deadline"
    return value / 1000 if value > 0 else None


class ExecutionConfig(BaseModel):
    """
    Base URL and timeout settings for one test run.

    Built once at startup and shared read-only by every test; instances are
    frozen and compare by value.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="HTTP(S) origin that relative request paths are joined onto",
    )
    connect_timeout_ms: int = Field(
        default=DEFAULT_CONNECT_TIMEOUT_MS,
        ge=0,
        description="Milliseconds allowed to establish a connection, 0 disables",
    )
    read_timeout_ms: int = Field(
        default=DEFAULT_READ_TIMEOUT_MS,
        ge=0,
        description="Milliseconds allowed between reads of the response, 0 disables",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("base_url must be a non-empty URL")
        # the URL parser trims these silently, the raw string is what gets joined
        if any(c.isspace() or not c.isprintable() for c in v):
            raise ValueError(f"base_url {v!r} contains whitespace or control characters")
        try:
            url = _http_url.validate_python(v)
        except ValidationError as e:
            raise ValueError(f"base_url {v!r} is not a valid http(s) URL") from e
        if url.query is not None or url.fragment is not None or "?" in v or "#" in v:
            raise ValueError(f"base_url {v!r} must not carry a query string or fragment")
        # keep the caller's spelling, AnyHttpUrl would normalise it
        return v

    @property
    def connect_timeout(self) -> float | None:
        return _ms_to_seconds(self.connect_timeout_ms)

    @property
    def read_timeout(self) -> float | None:
        return _ms_to_seconds(self.read_timeout_ms)

    def to_runtime_args(self) -> dict[str, Any]:
        return {
            "base_url": self.base_url,
            "connect_timeout": self.connect_timeout,
            "read_timeout": self.read_timeout,
        }
