from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ._utils._ssl_context import DEFAULT_TIMEOUT
from ._utils.constants import (
    DOTENV_FILE,
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
)
from .models.errors import BaseUrlMissingError
from .models.http import LogLevel


class Config(BaseModel):
    base_url: str
    access_token: Optional[str] = None
    log_level: LogLevel = LogLevel.INFO
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url", mode="before")
    @classmethod
    def strip_base_url(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, value: Any) -> Any:
        # accept names such as "debug" from the environment
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        if isinstance(value, str):
            try:
                return LogLevel[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Unknown log level {value!r}, expected one of "
                    f"{', '.join(level.name.lower() for level in LogLevel)}"
                ) from None
        return value

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        assert value > 0, "Timeout must be positive"
        return value


def resolve_config(
    base_url: Optional[str] = None,
    access_token: Optional[str] = None,
    *,
    log_level: Optional[LogLevel] = None,
    timeout: Optional[float] = None,
) -> Config:
    """Build a :class:`Config` from explicit values and the environment.

    Explicit arguments win over ``FLOWNET_*`` environment variables, which
    may also come from a ``.env`` file in the working directory.

    Raises:
        BaseUrlMissingError: If no base URL is configured anywhere.
    """
    load_dotenv(DOTENV_FILE)

    base_url_value = base_url or env.get(ENV_BASE_URL)
    if not base_url_value:
        raise BaseUrlMissingError()

    values: dict[str, Any] = {
        "base_url": base_url_value,
        "access_token": access_token or env.get(ENV_ACCESS_TOKEN) or None,
    }

    log_level_value = log_level if log_level is not None else env.get(ENV_LOG_LEVEL)
    if log_level_value is not None:
        values["log_level"] = log_level_value

    timeout_value = timeout if timeout is not None else env.get(ENV_TIMEOUT)
    if timeout_value is not None:
        values["timeout"] = timeout_value

    return Config(**values)
