"""Client configuration using pydantic-settings.

Values come from environment variables prefixed with ``STELLAR_`` or from a
local ``.env`` file.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stellar_horizon import __version__

HORIZON_TESTNET_URL = "https://horizon-testnet.stellar.org"
HORIZON_PUBLIC_URL = "https://horizon.stellar.org"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STELLAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Horizon
    # ======================
    horizon_url: str = Field(
        default=HORIZON_TESTNET_URL, description="Base URL of the Horizon server"
    )

    # ======================
    # HTTP transport
    # ======================
    http_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Timeout per request (seconds)"
    )
    user_agent: str = Field(
        default=f"stellar-horizon-python/{__version__}",
        min_length=1,
        description="User-Agent sent with every request",
    )

    # ======================
    # Diagnostics
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def is_testnet(self) -> bool:
        """Check if the configured Horizon server is the public testnet."""
        return self.horizon_url.rstrip("/") == HORIZON_TESTNET_URL

    def get_safe_dict(self) -> dict:
        """Return settings as a plain dict for diagnostics."""
        return {
            "horizon_url": self.horizon_url,
            "testnet": self.is_testnet,
            "http_timeout_seconds": self.http_timeout_seconds,
            "user_agent": self.user_agent,
            "debug": self.debug,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for applications embedding the client."""
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
