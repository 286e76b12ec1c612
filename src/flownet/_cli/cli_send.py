import json
from dataclasses import replace
from typing import Any

import click
from rich.console import Console

from .._config import Config
from .._flownet import FlowNet
from ..models.errors import NetworkError
from ..models.http import LogLevel
from ._utils._common import build_request, load_config, request_options, setup_logging


def decode_any(content: bytes) -> Any:
    """Decode JSON bodies, falling back to text for anything else."""
    if not content.strip():
        return None
    try:
        return json.loads(content)
    except ValueError:
        return content.decode("utf-8", errors="replace")


def create_client(config: Config) -> FlowNet:
    return FlowNet.from_config(config)


@click.command()
@request_options
@click.option(
    "--log-level",
    type=click.Choice([level.name.lower() for level in LogLevel]),
    default=None,
    help="Request tracing verbosity (defaults to FLOWNET_LOG_LEVEL or info)",
)
def send(
    path,
    base_url,
    token,
    method,
    query,
    body,
    headers,
    files,
    content_type,
    log_level,
):
    r"""Send a request and print the response body.

    \b
    Examples:
        flownet send /users -q active=true
        flownet send /avatar -X POST --content-type multipart -F file=./me.png
    """
    config = load_config(base_url, token)
    if log_level is not None:
        config = config.model_copy(update={"log_level": LogLevel[log_level.upper()]})
    if config.log_level > LogLevel.OFF:
        setup_logging(config.log_level.name.lower())

    request = build_request(path, method, query, body, headers, files, content_type)
    request = replace(request, decoder=decode_any)

    with create_client(config) as client:
        try:
            result = client.send(request)
        except NetworkError as e:
            click.echo(f"❌ {e!r}", err=True)
            if e.text:
                click.echo(e.text, err=True)
            click.get_current_context().exit(1)

    if result is None:
        return
    if isinstance(result, str):
        click.echo(result)
    else:
        Console().print_json(data=result)
