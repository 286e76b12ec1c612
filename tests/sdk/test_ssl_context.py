import ssl
from pathlib import Path

import certifi
import pytest

from flownet._utils._ssl_context import (
    ca_bundle_override,
    create_ssl_context,
    get_httpx_client_kwargs,
)


@pytest.fixture(autouse=True)
def clean_ca_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FLOWNET_CA_BUNDLE",
        "SSL_CERT_FILE",
        "REQUESTS_CA_BUNDLE",
        "SSL_CERT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


class TestCaBundleOverride:
    def test_nothing_configured(self):
        assert ca_bundle_override() == (None, None)

    def test_flownet_bundle_wins(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FLOWNET_CA_BUNDLE", "/etc/flownet/ca.pem")
        monkeypatch.setenv("SSL_CERT_FILE", "/etc/ssl/cert.pem")
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/requests/ca.pem")

        assert ca_bundle_override() == ("/etc/flownet/ca.pem", None)

    def test_standard_variables(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/requests/ca.pem")
        monkeypatch.setenv("SSL_CERT_DIR", "/etc/ssl/certs")

        assert ca_bundle_override() == ("/etc/requests/ca.pem", "/etc/ssl/certs")

    def test_user_home_is_expanded(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", "/home/angler")
        monkeypatch.setenv("FLOWNET_CA_BUNDLE", "~/ca.pem")

        assert ca_bundle_override()[0] == str(Path("/home/angler/ca.pem"))


class TestCreateSslContext:
    def test_default_context(self):
        assert isinstance(create_ssl_context(), ssl.SSLContext)

    def test_explicit_bundle(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FLOWNET_CA_BUNDLE", certifi.where())

        context = create_ssl_context()

        assert context.verify_mode == ssl.CERT_REQUIRED


def test_client_kwargs():
    kwargs = get_httpx_client_kwargs(5.0)

    assert kwargs["timeout"] == 5.0
    assert kwargs["follow_redirects"] is False
    assert isinstance(kwargs["verify"], ssl.SSLContext)
