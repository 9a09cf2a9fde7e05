from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_URL = "https://api.vpsnet.com"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class UpstreamConfig(BaseModel):
    """
    Immutable connection details for the VPSnet API.

    Built once from `Settings` at startup and handed to the HTTP client.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    api_key: str


class Settings(BaseSettings):
    """
    Central configuration for the VPSnet MCP server.

    All values are loaded from environment variables with `VPSNET_` prefix.
    You can also use a `.env` file in the working directory during development.
    """

    model_config = SettingsConfigDict(
        env_prefix="VPSNET_",
        env_file=".env",
        extra="ignore",
    )

    # VPSnet API
    api_key: str
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0

    # Server
    transport: str = "stdio"  # "stdio" or "http"
    server_host: str = "127.0.0.1"
    server_port: int = 8000
    log_level: str = "INFO"

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("VPSNET_API_KEY environment variable is required")
        return value

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or DEFAULT_API_URL

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}', expected one of {', '.join(LOG_LEVELS)}")
        return level

    def upstream(self) -> UpstreamConfig:
        return UpstreamConfig(base_url=self.api_url, api_key=self.api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from environment."""
    return Settings()  # type: ignore[call-arg]
