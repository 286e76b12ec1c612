import sys
from pathlib import Path

import pytest

# Ensure local source package (src/flownet) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from flownet import FlowNet, LogLevel  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "FLOWNET_URL",
        "FLOWNET_ACCESS_TOKEN",
        "FLOWNET_LOG_LEVEL",
        "FLOWNET_TIMEOUT",
        "FLOWNET_CA_BUNDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def secret() -> str:
    return "secret-access-token"


@pytest.fixture
def flownet(base_url: str, secret: str) -> FlowNet:
    return FlowNet(base_url, access_token=secret, log_level=LogLevel.DEBUG)


@pytest.fixture
def anyio_backend() -> str:
    """Async tests use asyncio primitives directly; run them on asyncio only."""
    return "asyncio"
