import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click test runner."""
    return CliRunner()


@pytest.fixture
def mock_env_vars(base_url: str) -> dict[str, str]:
    """Fixture to provide mock environment variables."""
    return {
        "FLOWNET_URL": base_url,
        "FLOWNET_ACCESS_TOKEN": "mock_token",
    }
