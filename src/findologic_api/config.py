"""Default client settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client defaults loaded from FINDOLOGIC_* environment variables.

    Values passed explicitly to ``FindologicApi`` always win over these.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINDOLOGIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Formatted with shopkey, shopurl and endpoint
    api_url: str = "https://service.findologic.com/ps/{shopkey}/{endpoint}"

    # Timeouts in seconds
    request_timeout: float = 3.0
    alivetest_timeout: float = 1.0

    # Observability
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
