"""Runtime configuration loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.url_builder import YAHOO_TRANSIT_SEARCH_URL

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/140.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Settings for the route search client and MCP server.

    Every field can be overridden with a ``NORIKAE_`` prefixed environment
    variable or a ``.env`` file, e.g. ``NORIKAE_REQUEST_TIMEOUT=60``.
    """

    model_config = SettingsConfigDict(
        env_prefix="NORIKAE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default=YAHOO_TRANSIT_SEARCH_URL, description="Yahoo Transit search endpoint"
    )
    request_timeout: int = Field(default=30, description="Request timeout in seconds")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header"
    )
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get settings (cached singleton)."""
    return Settings()
