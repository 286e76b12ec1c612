from typing import Optional, TypeVar

from httpx import AsyncClient, Client

from ._config import Config
from ._services._transport import TransportCore
from ._utils._logger import FlowNetLogger
from ._utils._request_spec import Request, ResolvedRequest
from ._utils._ssl_context import DEFAULT_TIMEOUT, get_httpx_client_kwargs
from .models.errors import InvalidRequestError
from .models.http import LogLevel

T = TypeVar("T")


class FlowNet:
    """Client facade binding a base URL to the request pipeline.

    Resolves :class:`Request` descriptors against the base URL, sends them
    through the transport core and returns the decoded response, raising a
    :class:`~flownet.models.errors.NetworkError` subclass on failure. Nothing
    is retried; to retry, call ``send`` again with the same descriptor.

    The base URL, log level, default token and timeout are fixed at
    construction. Build a new client to change them.

    Examples:
        ```python
        from flownet import FlowNet, Request

        async with FlowNet("https://api.example.com", access_token="...") as net:
            user = await net.send_async(Request[User](path="/me", response_type=User))
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        log_level: LogLevel = LogLevel.INFO,
        access_token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        self._base_url = base_url
        self._access_token = access_token
        self._timeout = timeout
        self._logger = FlowNetLogger(log_level)

        self._owns_client = client is None
        self._owns_client_async = async_client is None
        client_kwargs = (
            get_httpx_client_kwargs(timeout)
            if self._owns_client or self._owns_client_async
            else {}
        )
        self._client = client or Client(**client_kwargs)
        self._client_async = async_client or AsyncClient(**client_kwargs)

        self._core = TransportCore(
            self._logger, client=self._client, async_client=self._client_async
        )

        self._logger.log_configured(base_url)

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "FlowNet":
        return cls(
            config.base_url,
            log_level=config.log_level,
            access_token=config.access_token,
            timeout=config.timeout,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def log_level(self) -> LogLevel:
        return self._logger.log_level

    @property
    def timeout(self) -> float:
        return self._timeout

    def resolve(self, request: Request) -> ResolvedRequest:
        """Materialize ``request`` against this client's base URL and token."""
        return request.resolve(self._base_url, auth_token=self._access_token)

    def send(self, request: Request[T], *, timeout: Optional[float] = None) -> T:
        """Send ``request`` and return its decoded response.

        Args:
            request: The endpoint call to perform.
            timeout: Overrides the client timeout for this call, in seconds.

        Returns:
            The response body decoded into ``request.response_type``.

        Raises:
            InvalidRequestError: If the request cannot be built.
            HTTPStatusError: A subclass matching any non-2xx status.
            DecodingError: If the body does not match the response type.
            TransportError: If no response arrived, ``RequestTimeoutError``
                for timeouts.
        """
        resolved = self._resolve_logged(request)
        return self._core.send(resolved, request.decode, timeout=timeout)

    async def send_async(
        self, request: Request[T], *, timeout: Optional[float] = None
    ) -> T:
        """Asynchronously send ``request`` and return its decoded response.

        Cancelling the awaiting task cancels the underlying exchange and
        propagates ``asyncio.CancelledError``. Errors are the same as
        :meth:`send`.
        """
        resolved = self._resolve_logged(request)
        return await self._core.send_async(resolved, request.decode, timeout=timeout)

    def _resolve_logged(self, request: Request) -> ResolvedRequest:
        try:
            resolved = self.resolve(request)
        except InvalidRequestError as e:
            self._logger.log_error(e)
            raise
        self._logger.log_request(resolved)
        return resolved

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    async def aclose(self) -> None:
        if self._owns_client_async:
            await self._client_async.aclose()

    def __enter__(self) -> "FlowNet":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    async def __aenter__(self) -> "FlowNet":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
        self.close()
