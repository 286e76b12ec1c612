"""Percent-encoding and body encoders for query strings, forms and multipart.

All encoders preserve the insertion order of the parameter mapping, so the
same mapping always produces the same bytes.
"""

import uuid
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Any, Optional
from urllib.parse import quote

from ..models.http import MultipartData

# Characters left unescaped in query strings, on top of the RFC 3986
# unreserved set. "&", "=", "+" and "#" are always escaped.
QUERY_SAFE = "!$'()*,;:@/?"

# Query baseline minus the general (":#[]@") and sub ("!$&'()*+,;=")
# delimiters, RFC 3986 section 3.4.
FORM_SAFE = "/?"

MAX_NESTING_DEPTH = 32

CRLF = "\r\n"


def stringify(value: Any) -> str:
    """Render a scalar parameter value the way it goes on the wire."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return stringify(value.value)
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def percent_encode(value: str, safe: str = FORM_SAFE) -> str:
    """Percent-encode ``value`` as UTF-8, leaving only ``safe`` unescaped."""
    return quote(value, safe=safe, encoding="utf-8")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def flatten_params(
    params: Mapping[str, Any], parent_key: Optional[str] = None, depth: int = 0
) -> Iterator[tuple[str, str]]:
    """Flatten nested parameters into raw ``(key, value)`` pairs.

    Nested mappings use ``parent[child]`` keys and sequences use a trailing
    ``[]``. Keys and values are returned unescaped.

    Args:
        params: The parameters to flatten.
        parent_key: Key prefix of the enclosing mapping.
        depth: Current nesting depth.

    Raises:
        ValueError: If the nesting is deeper than ``MAX_NESTING_DEPTH``.
    """
    if depth > MAX_NESTING_DEPTH:
        raise ValueError(
            f"Parameters are nested deeper than {MAX_NESTING_DEPTH} levels"
        )

    for key, value in params.items():
        full_key = f"{parent_key}[{key}]" if parent_key is not None else str(key)

        if isinstance(value, Mapping):
            yield from flatten_params(value, full_key, depth + 1)
        elif _is_sequence(value):
            for entry in value:
                if isinstance(entry, Mapping):
                    yield from flatten_params(entry, f"{full_key}[]", depth + 1)
                else:
                    yield f"{full_key}[]", stringify(entry)
        else:
            yield full_key, stringify(value)


def query_items(params: Optional[Mapping[str, Any]]) -> list[tuple[str, str]]:
    """Turn query parameters into ordered ``(name, value)`` items.

    Sequence values repeat the key once per element. Nested mappings are
    flattened with bracket notation.
    """
    if not params:
        return []

    items: list[tuple[str, str]] = []
    for key, value in params.items():
        if isinstance(value, Mapping):
            items.extend(flatten_params(value, str(key), 1))
        elif _is_sequence(value):
            items.extend((str(key), stringify(entry)) for entry in value)
        else:
            items.append((str(key), stringify(value)))
    return items


def encode_query(params: Optional[Mapping[str, Any]]) -> str:
    return "&".join(
        f"{percent_encode(name, QUERY_SAFE)}={percent_encode(value, QUERY_SAFE)}"
        for name, value in query_items(params)
    )


def encode_form(params: Optional[Mapping[str, Any]]) -> str:
    """Encode parameters as an application/x-www-form-urlencoded body.

    Examples:
        >>> encode_form({"user": {"name": "Ann", "tags": ["a", "b"]}})
        'user%5Bname%5D=Ann&user%5Btags%5D%5B%5D=a&user%5Btags%5D%5B%5D=b'
    """
    if not params:
        return ""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(value)}"
        for key, value in flatten_params(params)
    )


def make_boundary() -> str:
    return f"FlowNet-{uuid.uuid4().hex}"


def encode_multipart(
    params: Optional[Mapping[str, Any]],
    parts: Optional[Sequence[MultipartData]],
    boundary: str,
) -> bytes:
    """Build a multipart/form-data body.

    Every field starts with ``--<boundary>`` and ends with CRLF. Plain fields
    carry only a Content-Disposition header, files also carry Content-Type.
    The body is closed with ``--<boundary>--``.

    Args:
        params: Plain form fields, flattened like a url-encoded form.
        parts: Files to attach.
        boundary: Delimiter token; must not occur in any field.

    Returns:
        bytes: The encoded body.
    """
    delimiter = f"--{boundary}{CRLF}".encode()
    body = bytearray()

    for name, value in flatten_params(params or {}):
        body += delimiter
        body += f'Content-Disposition: form-data; name="{name}"{CRLF}{CRLF}'.encode()
        body += value.encode("utf-8")
        body += CRLF.encode()

    for part in parts or ():
        body += delimiter
        body += (
            f'Content-Disposition: form-data; name="{part.name}"; '
            f'filename="{part.file_name}"{CRLF}'
        ).encode()
        body += f"Content-Type: {part.mime_type}{CRLF}{CRLF}".encode()
        body += part.file_data
        body += CRLF.encode()

    body += f"--{boundary}--{CRLF}".encode()
    return bytes(body)
