"""FlowNet models.

Value types describing HTTP requests and the errors a call can end with.
"""

from .errors import (
    BadRequestError,
    BaseUrlMissingError,
    ClientError,
    DecodingError,
    ForbiddenError,
    HTTPStatusError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownError,
)
from .http import ContentType, HeaderField, HTTPMethod, LogLevel, MultipartData

__all__ = [
    "BadRequestError",
    "BaseUrlMissingError",
    "ClientError",
    "DecodingError",
    "ForbiddenError",
    "HTTPStatusError",
    "InvalidRequestError",
    "NetworkError",
    "NotFoundError",
    "RequestTimeoutError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnknownError",
    "ContentType",
    "HeaderField",
    "HTTPMethod",
    "LogLevel",
    "MultipartData",
]
