"""
Application configuration using pydantic-settings.
"""
from typing import List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "QuickDigest"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    # YouTube endpoints
    YOUTUBE_TIMEDTEXT_URL: str = "https://www.youtube.com/api/timedtext"
    YOUTUBE_OEMBED_URL: str = "https://www.youtube.com/oembed"
    YOUTUBE_WATCH_URL: str = "https://www.youtube.com/watch"
    TRANSCRIPT_LANGUAGE: str = "en"
    METADATA_CACHE_TTL_SECONDS: int = 3600

    # Exchange ticker
    PRICE_TICKER_URL: str = "https://api.binance.com/api/v3/ticker/24hr"
    PRICE_SYMBOL: str = "BTCUSDT"
    PRICE_POLL_INTERVAL_SECONDS: float = 1.0
    PRICE_HISTORY_CAPACITY: int = 50
    PRICE_POLLER_ENABLED: bool = True

    # Every outbound request is bounded by this timeout
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
