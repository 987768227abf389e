"""Configuration management for the artwork uploader."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .models.artwork import Credentials


DEFAULT_API_URL = "https://prod.palacio.life/backend/api/v1"

# Hard ceiling on the size of an uploaded image, not configurable
MAX_UPLOAD_BYTES = 100_000_000


class ConfigError(ValueError):
    """Raised when required settings are missing or malformed."""


@dataclass
class ApiConfig:
    """Canvia API configuration."""

    url: str = DEFAULT_API_URL
    request_timeout: float = 60.0  # seconds, JSON endpoints
    upload_timeout: float = 300.0  # seconds, image upload

    def __post_init__(self) -> None:
        self.url = self.url.rstrip("/")


@dataclass
class AccountConfig:
    """Canvia account and target playlist."""

    username: str
    password: str
    playlist: str

    @property
    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)


@dataclass
class Config:
    """Main configuration container."""

    api: ApiConfig
    account: AccountConfig
    max_upload_workers: int = 4

    @classmethod
    def from_environment(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from a .env file and environment variables."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv(find_dotenv(usecwd=True))

        username = os.getenv("USERNAME")
        password = os.getenv("PASSWORD")
        playlist = os.getenv("PLAYLIST")

        if not all([username, password, playlist]):
            raise ConfigError(
                "Please create an .env file with USERNAME, PASSWORD, and PLAYLIST. "
                "See README.md for more details."
            )

        return cls(
            api=ApiConfig(
                url=os.getenv("API_URL") or DEFAULT_API_URL,
                request_timeout=_float_env("REQUEST_TIMEOUT", 60.0),
                upload_timeout=_float_env("UPLOAD_TIMEOUT", 300.0),
            ),
            account=AccountConfig(
                username=username,
                password=password,
                playlist=playlist,
            ),
            max_upload_workers=_int_env("UPLOAD_WORKERS", 4),
        )

    def validate(self) -> None:
        """Validate the configuration."""
        logger = logging.getLogger(__name__)

        if not self.account.username:
            raise ConfigError("USERNAME is required")
        if not self.account.password:
            raise ConfigError("PASSWORD is required")
        if not self.account.playlist:
            raise ConfigError("PLAYLIST is required")
        if self.max_upload_workers < 1:
            raise ConfigError("Number of upload workers must be at least 1")
        if self.api.request_timeout <= 0 or self.api.upload_timeout <= 0:
            raise ConfigError("Timeouts must be positive")

        if not self.api.url.startswith("https://"):
            logger.warning(f"API_URL '{self.api.url}' is not using HTTPS")


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got '{value}'") from None


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got '{value}'") from None


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
