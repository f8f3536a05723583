import logging
from types import TracebackType
from typing_extensions import Self
from aiohttp import ClientSession, ClientTimeout

from config.models.execution import ExecutionConfig
from request_execution.models import TransportRequest, TransportResponse
from request_execution.transport.base import TransportEngineType, TransportEngine
from core.abstract_factory import TypeAbstractFactory


logger = logging.getLogger(__name__)


class TransportEngineFactory(TypeAbstractFactory[TransportEngineType, TransportEngine]):
    pass


@TransportEngineFactory.register(TransportEngineType.AIOHTTP)
class AiohttpEngine(TransportEngine):
    """
    TransportEngine adapter that uses aiohttp.ClientSession to make HTTP requests.

    The connect timeout bounds socket connection establishment and the read
    timeout bounds each wait for response data; there is no overall deadline.
    A timeout of None disables that deadline.
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float | None = 5.0,
        read_timeout: float | None = 5.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = ClientTimeout(
            total=None,
            sock_connect=connect_timeout,
            sock_read=read_timeout,
        )
        self._session: ClientSession | None = None

    @classmethod
    def from_config(cls, cfg: ExecutionConfig) -> Self:
        return cls(**cfg.to_runtime_args())

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> ClientTimeout:
        return self._timeout

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            raise RuntimeError(
                f"{self.__class__.__name__} must be used as an async context manager"
            )
        return self._session

    def build_url(self, url: str) -> str:
        """Join a relative path onto the base URL; absolute URLs pass through."""
        if url.startswith(("http://", "https://")):
            return url
        path = url.lstrip("/")
        return f"{self._base_url}/{path}" if path else self._base_url

    async def __aenter__(self) -> Self:
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def send(self, request: TransportRequest) -> TransportResponse:
        session = self.session
        url = self.build_url(request.url)

        try:
            async with session.request(
                request.method,
                url,
                headers=request.headers,
                params=request.params,
                json=request.json,
                data=request.data,
            ) as response:
                body = await response.read()
                return TransportResponse(
                    status=response.status,
                    # repeated names collapse to their first value
                    headers=dict(response.headers),
                    body=body,
                    error=None,
                )
        except Exception as e:
            logger.warning("%s %s failed: %s: %s", request.method, url, type(e).__name__, e)
            return TransportResponse(
                status=None, headers={}, body=None, error=f"{type(e).__name__}: {e}"
            )
