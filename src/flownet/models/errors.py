from typing import Optional


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL missing. Pass it explicitly or set the FLOWNET_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class NetworkError(Exception):
    """Base class for every failure a FlowNet call can end with.

    Errors compare structurally: two errors are equal when they have the
    same class, status code and description. The raw response body is kept
    for diagnostics but does not take part in equality.

    Attributes:
        status_code: HTTP status code, when a response was received.
        body: Raw response body, when a response was received.
        description: Human readable summary of the failure.
    """

    default_description = "Network request failed"

    def __init__(
        self,
        description: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ) -> None:
        self.description = description or self.default_description
        self.status_code = status_code
        self.body = body
        super().__init__(self.description)

    @property
    def text(self) -> Optional[str]:
        """The raw body decoded as UTF-8, or ``None`` when there is no body."""
        if self.body is None:
            return None
        return self.body.decode("utf-8", errors="replace")

    @property
    def is_retryable(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.status_code == other.status_code
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((type(self), self.status_code, self.description))

    def __repr__(self) -> str:
        if self.status_code is None:
            return f"{type(self).__name__}({self.description!r})"
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"description={self.description!r})"
        )


class InvalidRequestError(NetworkError):
    """The request could not be built (bad base URL, unencodable body...)."""

    default_description = "Invalid request"


class HTTPStatusError(NetworkError):
    """A response arrived with a status code outside 200-299."""

    default_description = "Unexpected HTTP status"

    def __init__(self, status_code: int, body: Optional[bytes] = None) -> None:
        super().__init__(
            f"{self.default_description} ({status_code})",
            status_code=status_code,
            body=body,
        )


class BadRequestError(HTTPStatusError):
    default_description = "Bad request"


class UnauthorizedError(HTTPStatusError):
    default_description = "Unauthorized"


class ForbiddenError(HTTPStatusError):
    default_description = "Forbidden"


class NotFoundError(HTTPStatusError):
    default_description = "Not found"


class ClientError(HTTPStatusError):
    """Any 4xx status without a dedicated error class."""

    default_description = "Client error"


class ServerError(HTTPStatusError):
    """A 5xx status. The numeric code is always preserved."""

    default_description = "Server error"

    @property
    def is_retryable(self) -> bool:
        return True


class UnknownError(HTTPStatusError):
    """A status code outside 200-599."""

    default_description = "Unknown response"


class DecodingError(NetworkError):
    """A 2xx response body did not match the declared response type."""

    default_description = "Response could not be decoded"


class TransportError(NetworkError):
    """The exchange failed before a response arrived (DNS, TLS, reset...).

    Attributes:
        underlying: The exception raised by the HTTP client.
    """

    default_description = "Transport failure"

    def __init__(
        self,
        underlying: Optional[BaseException] = None,
        description: Optional[str] = None,
    ) -> None:
        self.underlying = underlying
        if description is None and underlying is not None:
            description = f"{self.default_description}: {type(underlying).__name__}"
        super().__init__(description)

    @property
    def is_retryable(self) -> bool:
        return True


class RequestTimeoutError(TransportError):
    default_description = "Request timed out"


STATUS_ERRORS: dict[int, type[HTTPStatusError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def error_for_status(status_code: int, body: Optional[bytes] = None) -> HTTPStatusError:
    """Classify a non-2xx status code into the matching error.

    Args:
        status_code: The response status code.
        body: The raw response body, attached to the error.

    Returns:
        HTTPStatusError: The error instance to raise.
    """
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code](status_code, body)
    if 400 <= status_code < 500:
        return ClientError(status_code, body)
    if 500 <= status_code < 600:
        return ServerError(status_code, body)
    return UnknownError(status_code, body)
