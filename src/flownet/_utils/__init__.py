from ._curl import to_curl_command
from ._encoding import (
    encode_form,
    encode_multipart,
    encode_query,
    flatten_params,
    make_boundary,
    percent_encode,
    query_items,
)
from ._errors import handle_transport_errors
from ._logger import FlowNetLogger
from ._request_spec import Request, ResolvedRequest
from ._ssl_context import DEFAULT_TIMEOUT, get_httpx_client_kwargs

__all__ = [
    "to_curl_command",
    "encode_form",
    "encode_multipart",
    "encode_query",
    "flatten_params",
    "make_boundary",
    "percent_encode",
    "query_items",
    "handle_transport_errors",
    "FlowNetLogger",
    "Request",
    "ResolvedRequest",
    "DEFAULT_TIMEOUT",
    "get_httpx_client_kwargs",
]
