"""Environment-driven application settings."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Development-only fallback. Generate a real key with: openssl rand -hex 32
DEFAULT_JWT_SECRET_KEY = "dev-only-identity-service-secret-key-change-me-0123456789"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(frozen=True, env_ignore_empty=True, extra="ignore")

    jwt_secret_key: str = DEFAULT_JWT_SECRET_KEY
    jwt_expiration_hours: int = Field(default=24, ge=1)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    mongo_url: Optional[str] = None
    mongodb_database: str = "identity"
    expose_password_hash: bool = True
    cors_origins: str = "*"
    port: int = Field(default=8000, ge=1, le=65535)

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret_key == DEFAULT_JWT_SECRET_KEY


def load_settings() -> Settings:
    """Read settings from the process environment.

    Raises pydantic.ValidationError when a variable cannot be converted.
    """
    return Settings()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    settings = load_settings()
    if settings.uses_default_secret:
        logger.warning(
            "JWT_SECRET_KEY not set, using development fallback secret. "
            "Generate a secure key with: openssl rand -hex 32"
        )
    return settings
