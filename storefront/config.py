# storefront/config.py
import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Algemene app settings ===
    app_env: str = "local"  # local | development | production
    service_name: str = "storefront"

    # === Database ===
    database_url: str = Field(
        "sqlite:///./storefront.db", description="SQLAlchemy database URL"
    )

    # === Logging ===
    log_level: str = "INFO"

    # === Store defaults ===
    default_currency: str = "SEK"
    default_locale: str = "en"
    supported_locales: list[str] = ["en", "sv"]

    # === Admin (HTTP Basic) ===
    admin_username: Optional[str] = None
    admin_password: Optional[str] = None

    # === Rate Limiting ===
    rate_limit_public: str = "120/minute"

    # === Error reporting ===
    sentry_dsn: Optional[str] = None

    # === Pydantic Settings config ===
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance met simpele env-overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"
    elif env == "development":
        s.log_level = "DEBUG"

    return s


# from storefront.config import settings
settings = get_settings()
