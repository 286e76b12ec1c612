from collections.abc import Collection, Mapping
from typing import Optional

REDACTED = "***"

_SKIPPED_HEADERS = {"cookie"}
_BODYLESS_METHODS = {"GET", "HEAD"}


def _shell_quote(value: str) -> str:
    return "'" + value.replace("'", "'\\''") + "'"


def redact_header(value: str) -> str:
    """Mask a credential header value, keeping the auth scheme visible."""
    scheme, _, credentials = value.partition(" ")
    if credentials:
        return f"{scheme} {REDACTED}"
    return REDACTED


def to_curl_command(
    url: str,
    method: str,
    headers: Mapping[str, str],
    body: Optional[bytes] = None,
    *,
    redact: Collection[str] = (),
) -> str:
    """Render an HTTP request as a shell-executable cURL command.

    ``-X`` is omitted for GET and HEAD, the Cookie header is never included,
    and ``-d`` is only emitted for bodies that decode as UTF-8.

    Args:
        url: Absolute request URL.
        method: HTTP method.
        headers: Request headers.
        body: Raw request body.
        redact: Header names (case-insensitive) whose values are masked.

    Returns:
        str: The command, one option per line.
    """
    redacted = {name.lower() for name in redact}
    command = [f'curl "{url}"']

    if method.upper() not in _BODYLESS_METHODS:
        command.append(f"-X {method.upper()}")

    for key, value in headers.items():
        if key.lower() in _SKIPPED_HEADERS:
            continue
        if key.lower() in redacted:
            value = redact_header(value)
        command.append(f"-H {_shell_quote(f'{key}: {value}')}")

    if body:
        try:
            text: Optional[str] = body.decode("utf-8")
        except UnicodeDecodeError:
            # binary uploads cannot be reproduced inline
            text = None
        if text is not None:
            command.append(f"-d {_shell_quote(text)}")

    return " \\\n\t".join(command)
