from dataclasses import dataclass
from enum import Enum, IntEnum


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ContentType(str, Enum):
    """Content types a request body can be encoded as."""

    JSON = "application/json"
    URL_ENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


class HeaderField(str, Enum):
    AUTHENTICATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    ACCEPT_TYPE = "Accept"
    AUTH_TOKEN = "X-AUTH-TOKEN"
    ACCEPT_ENCODING = "Accept-Encoding"


class LogLevel(IntEnum):
    """Verbosity of request/response tracing.

    Levels are ordered, so ``level >= LogLevel.INFO`` reads naturally.
    """

    OFF = 0
    INFO = 1
    DEBUG = 2


@dataclass(frozen=True)
class MultipartData:
    """A file attached to a multipart/form-data body."""

    name: str
    file_data: bytes
    file_name: str
    mime_type: str
