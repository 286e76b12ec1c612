import click

from ..models.errors import InvalidRequestError
from ._utils._common import build_request, load_config, request_options


@click.command()
@request_options
def curl(path, base_url, token, method, query, body, headers, files, content_type):
    r"""Print the cURL command equivalent to a request, without sending it.

    \b
    Examples:
        flownet curl /users -q active=true
        flownet curl /users -X POST --content-type url-encoded -d name=Ann
    """
    config = load_config(base_url, token)
    request = build_request(path, method, query, body, headers, files, content_type)

    try:
        resolved = request.resolve(config.base_url, auth_token=config.access_token)
    except InvalidRequestError as e:
        raise click.ClickException(e.description) from e

    click.echo(resolved.to_curl_command())
