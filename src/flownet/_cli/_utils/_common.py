import logging
import mimetypes
from pathlib import Path
from typing import Optional

import click

from ..._config import Config, resolve_config
from ..._utils._request_spec import Request
from ...models.errors import BaseUrlMissingError
from ...models.http import ContentType, MultipartData

CONTENT_TYPES = {
    "json": ContentType.JSON,
    "url-encoded": ContentType.URL_ENCODED,
    "multipart": ContentType.MULTIPART,
}


def parse_pairs(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    """Click callback turning repeated ``key=value`` options into a dict."""
    pairs: dict[str, str] = {}
    for value in values:
        key, sep, item = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {value!r}")
        pairs[key] = item
    return pairs


def parse_headers(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for value in values:
        key, sep, item = value.partition(":")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected 'Name: value', got {value!r}")
        headers[key.strip()] = item.strip()
    return headers


def request_options(function):
    function = click.option(
        "--content-type",
        type=click.Choice(list(CONTENT_TYPES)),
        default="json",
        show_default=True,
        help="How body fields are encoded",
    )(function)
    function = click.option(
        "--file",
        "-F",
        "files",
        multiple=True,
        callback=parse_pairs,
        help="Multipart file as field=path (repeatable)",
    )(function)
    function = click.option(
        "--header",
        "-H",
        "headers",
        multiple=True,
        callback=parse_headers,
        help="Extra header as 'Name: value' (repeatable)",
    )(function)
    function = click.option(
        "--data",
        "-d",
        "body",
        multiple=True,
        callback=parse_pairs,
        help="Body field as key=value (repeatable)",
    )(function)
    function = click.option(
        "--query",
        "-q",
        "query",
        multiple=True,
        callback=parse_pairs,
        help="Query parameter as key=value (repeatable)",
    )(function)
    function = click.option(
        "--method", "-X", default="GET", show_default=True, help="HTTP method"
    )(function)
    function = click.option(
        "--token", help="Bearer token (defaults to FLOWNET_ACCESS_TOKEN)"
    )(function)
    function = click.option(
        "--base-url", help="Base URL (defaults to FLOWNET_URL)"
    )(function)
    function = click.argument("path")(function)
    return function


def load_config(base_url: Optional[str], token: Optional[str]) -> Config:
    try:
        return resolve_config(base_url, token)
    except BaseUrlMissingError as e:
        raise click.ClickException(e.message) from e


def read_files(files: dict[str, str]) -> list[MultipartData]:
    parts = []
    for field, file_path in files.items():
        path = Path(file_path)
        if not path.is_file():
            raise click.BadParameter(f"no such file: {file_path}", param_hint="--file")
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        parts.append(
            MultipartData(
                name=field,
                file_data=path.read_bytes(),
                file_name=path.name,
                mime_type=mime_type,
            )
        )
    return parts


def build_request(
    path: str,
    method: str,
    query: dict[str, str],
    body: dict[str, str],
    headers: dict[str, str],
    files: dict[str, str],
    content_type: str,
) -> Request:
    resolved_type = CONTENT_TYPES[content_type]
    if files and resolved_type is not ContentType.MULTIPART:
        raise click.UsageError("--file requires --content-type multipart")

    return Request(
        path=path,
        method=method,
        content_type=resolved_type,
        query_params=query or None,
        body=body or None,
        headers=headers or None,
        multipart_data=read_files(files) or None,
    )


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if level == "debug" else logging.INFO,
        format="%(message)s",
    )
