from collections.abc import Callable
from typing import Any, Optional, TypeVar

from httpx import AsyncClient, Client, Response
from pydantic import ValidationError

from .._utils._errors import handle_transport_errors
from .._utils._logger import FlowNetLogger
from .._utils._request_spec import ResolvedRequest
from ..models.errors import DecodingError, NetworkError, error_for_status

T = TypeVar("T")

DECODE_ERRORS = (ValueError, TypeError, KeyError)


def _location(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def describe_decoding_error(error: BaseException) -> str:
    """Summarize a decoding failure without echoing the offending payload."""
    if isinstance(error, ValidationError):
        details = "; ".join(
            f"{_location(err['loc'])}: {err['msg']}"
            for err in error.errors(include_input=False, include_url=False)
        )
        return (
            f"{error.error_count()} validation error(s) for {error.title}: {details}"
        )
    return f"{type(error).__name__}: {error}"


def _timeout_kwargs(timeout: Optional[float]) -> dict[str, Any]:
    return {} if timeout is None else {"timeout": timeout}


class TransportCore:
    """Performs exactly one HTTP exchange per call and classifies the outcome.

    Holds no per-call state; the httpx clients are shared and may serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        logger: FlowNetLogger,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = logger
        self._client = client
        self._client_async = async_client

    def send(
        self,
        request: ResolvedRequest,
        decoder: Callable[[bytes], T],
        *,
        timeout: Optional[float] = None,
    ) -> T:
        if self._client is None:
            raise RuntimeError("TransportCore has no synchronous client")

        try:
            with handle_transport_errors():
                response = self._client.request(
                    request.method,
                    request.url,
                    headers=dict(request.headers),
                    content=request.body,
                    **_timeout_kwargs(timeout),
                )
            return self._handle_response(response, decoder)
        except NetworkError as e:
            self._logger.log_error(e)
            raise

    async def send_async(
        self,
        request: ResolvedRequest,
        decoder: Callable[[bytes], T],
        *,
        timeout: Optional[float] = None,
    ) -> T:
        if self._client_async is None:
            raise RuntimeError("TransportCore has no asynchronous client")

        try:
            with handle_transport_errors():
                response = await self._client_async.request(
                    request.method,
                    request.url,
                    headers=dict(request.headers),
                    content=request.body,
                    **_timeout_kwargs(timeout),
                )
            return self._handle_response(response, decoder)
        except NetworkError as e:
            self._logger.log_error(e)
            raise

    def _handle_response(
        self, response: Response, decoder: Callable[[bytes], T]
    ) -> T:
        body = response.content
        self._logger.log_response(response, body)

        if not 200 <= response.status_code < 300:
            raise error_for_status(response.status_code, body)

        try:
            return decoder(body)
        except DECODE_ERRORS as e:
            raise DecodingError(describe_decoding_error(e)) from e
