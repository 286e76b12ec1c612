import click

from .cli_curl import curl
from .cli_send import send


@click.group()
@click.version_option(package_name="flownet")
def cli() -> None:
    """FlowNet command line: build, inspect and send HTTP requests."""


cli.add_command(curl)
cli.add_command(send)
