from logging import getLogger

import httpx

from ..models.errors import NetworkError
from ..models.http import HeaderField, LogLevel
from ._curl import REDACTED, redact_header
from ._request_spec import ResolvedRequest

MAX_LOGGED_BODY = 2048

_REDACTED_HEADERS = (HeaderField.AUTHENTICATION.value,)

# Values replaced entirely
_MASKED_HEADERS = ("Cookie", "Set-Cookie")


def _redacted_headers(headers) -> dict[str, str]:
    redacted = {name.lower() for name in _REDACTED_HEADERS}
    masked = {name.lower() for name in _MASKED_HEADERS}
    result = {}
    for key, value in headers.items():
        if key.lower() in redacted:
            value = redact_header(value)
        elif key.lower() in masked:
            value = REDACTED
        result[key] = value
    return result


class FlowNetLogger:
    """Request/response tracing gated by a :class:`LogLevel`.

    Records go to the standard ``flownet`` logger; method and URL are logged
    at INFO, headers, bodies and the cURL reproduction at DEBUG. Credentials
    are always masked.
    """

    def __init__(self, log_level: LogLevel = LogLevel.INFO) -> None:
        self._logger = getLogger("flownet")
        self._log_level = LogLevel(log_level)

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    def log_configured(self, base_url: str) -> None:
        if self._log_level >= LogLevel.DEBUG:
            self._logger.debug(
                f"FlowNet configured for {base_url} "
                f"(log level {self._log_level.name})"
            )

    def log_request(self, request: ResolvedRequest) -> None:
        if self._log_level < LogLevel.INFO:
            return

        self._logger.info(f"[FlowNet] Request: {request.method} {request.url}")

        if self._log_level >= LogLevel.DEBUG:
            self._logger.debug(f"HEADERS: {_redacted_headers(request.headers)}")
            self._logger.debug(
                "cURL:\n"
                + request.to_curl_command(redact=_REDACTED_HEADERS)
            )

    def log_response(self, response: httpx.Response, body: bytes) -> None:
        if self._log_level < LogLevel.INFO:
            return

        self._logger.info(
            f"[FlowNet] Response: {response.status_code} "
            f"{response.request.method} {response.request.url}"
        )

        if self._log_level >= LogLevel.DEBUG:
            self._logger.debug(f"HEADERS: {_redacted_headers(response.headers)}")
            text = body.decode("utf-8", errors="replace")
            if len(text) > MAX_LOGGED_BODY:
                text = f"{text[:MAX_LOGGED_BODY]}... ({len(body)} bytes)"
            self._logger.debug(f"BODY: {text}")

    def log_error(self, error: NetworkError) -> None:
        if self._log_level < LogLevel.INFO:
            return

        self._logger.info(f"[FlowNet] Failure: {error!r}")

        if self._log_level >= LogLevel.DEBUG and error.__cause__ is not None:
            self._logger.debug(f"CAUSE: {error.__cause__}")
