"""Configuration surface for the LINE Pay client."""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from .models.errors import LinePayConfigError

# Default timeout in milliseconds.
DEFAULT_TIMEOUT = 20000


class Environment(str, Enum):
    """LINE Pay API environment."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        return LINE_PAY_API_BASE_URL[self]


LINE_PAY_API_BASE_URL = {
    Environment.PRODUCTION: "https://api-pay.line.me",
    Environment.SANDBOX: "https://sandbox-api-pay.line.me",
}


class LinePaySettings(BaseSettings):
    """Channel credentials and client settings, read from ``LINE_PAY_*``."""

    channel_id: str = ""
    channel_secret: str = ""
    env: Literal["sandbox", "production"] = "sandbox"
    timeout: int = DEFAULT_TIMEOUT

    class Config:
        env_prefix = "LINE_PAY_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def load_settings(env_file: str | None = None) -> LinePaySettings:
    """Load LinePaySettings once per process."""
    kwargs = {"_env_file": Path(env_file)} if env_file else {}
    try:
        return LinePaySettings(**kwargs)
    except ValidationError as exc:
        raise LinePayConfigError(f"Invalid LINE Pay settings: {exc}") from exc


def resolve_environment(env: Environment | str) -> Environment:
    try:
        return Environment(env)
    except ValueError:
        raise LinePayConfigError(
            f"env must be one of {[e.value for e in Environment]}, got {env!r}"
        ) from None


def validate_credentials(channel_id: str | None, channel_secret: str | None) -> tuple[str, str]:
    """Return stripped credentials or raise LinePayConfigError."""
    if not isinstance(channel_id, str) or not channel_id.strip():
        raise LinePayConfigError("channelId is required and cannot be empty")
    if not isinstance(channel_secret, str) or not channel_secret.strip():
        raise LinePayConfigError("channelSecret is required and cannot be empty")
    return channel_id.strip(), channel_secret.strip()


def validate_timeout(timeout: int) -> int:
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise LinePayConfigError(f"timeout must be a positive integer (ms), got {timeout!r}")
    return timeout
