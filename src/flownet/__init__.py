"""FlowNet: a declarative, typed HTTP client core.

Describe each endpoint call as a :class:`Request`, then send it through a
:class:`FlowNet` client bound to a base URL.
"""

from ._config import Config, resolve_config
from ._flownet import FlowNet
from ._utils._curl import to_curl_command
from ._utils._request_spec import Request, ResolvedRequest
from .models import (
    BadRequestError,
    BaseUrlMissingError,
    ClientError,
    ContentType,
    DecodingError,
    ForbiddenError,
    HeaderField,
    HTTPMethod,
    HTTPStatusError,
    InvalidRequestError,
    LogLevel,
    MultipartData,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownError,
)

__all__ = [
    "Config",
    "resolve_config",
    "FlowNet",
    "to_curl_command",
    "Request",
    "ResolvedRequest",
    "BadRequestError",
    "BaseUrlMissingError",
    "ClientError",
    "ContentType",
    "DecodingError",
    "ForbiddenError",
    "HeaderField",
    "HTTPMethod",
    "HTTPStatusError",
    "InvalidRequestError",
    "LogLevel",
    "MultipartData",
    "NetworkError",
    "NotFoundError",
    "RequestTimeoutError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnknownError",
]
