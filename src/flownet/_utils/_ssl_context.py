import os
import ssl
from typing import Any, Optional

from .constants import (
    ENV_CA_BUNDLE,
    ENV_REQUESTS_CA_BUNDLE,
    ENV_SSL_CERT_DIR,
    ENV_SSL_CERT_FILE,
)

DEFAULT_TIMEOUT = 30.0


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def ca_bundle_override() -> tuple[Optional[str], Optional[str]]:
    """Return the ``(cafile, capath)`` pair configured in the environment.

    ``FLOWNET_CA_BUNDLE`` wins over ``SSL_CERT_FILE``, which wins over
    ``REQUESTS_CA_BUNDLE``.
    """
    cafile = (
        _env_path(ENV_CA_BUNDLE)
        or _env_path(ENV_SSL_CERT_FILE)
        or _env_path(ENV_REQUESTS_CA_BUNDLE)
    )
    return cafile, _env_path(ENV_SSL_CERT_DIR)


def create_ssl_context() -> ssl.SSLContext:
    cafile, capath = ca_bundle_override()
    if cafile or capath:
        return ssl.create_default_context(cafile=cafile, capath=capath)

    # System trust store first, bundled certifi roots otherwise
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(cafile=certifi.where())


def get_httpx_client_kwargs(timeout: float = DEFAULT_TIMEOUT) -> dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients.

    Redirects are not followed; a 3xx response is classified like any other
    non-2xx status.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": timeout,
        "follow_redirects": False,
    }
