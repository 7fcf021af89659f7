"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.app.core.validation import PhonePolicy

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class ValidationSettings(BaseModel):
    """
    Client validation policy.

    phone_policy: "strict" accepts exactly 10 digits, "general" accepts common
        phone formats (optional +, spaces, dots, hyphens, parentheses; 7-15 digits).
    check_email_on_update: Reject an update whose email belongs to another client
        before reaching the database.
    """

    phone_policy: PhonePolicy = PhonePolicy.STRICT
    check_email_on_update: bool = True


class CorsSettings(BaseModel):
    """Origins allowed to call the API from a browser (the single-page frontend)."""

    allowed_origins: list[str] = ["http://localhost:4200"]


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: VALIDATION__PHONE_POLICY=general, CORS__ALLOWED_ORIGINS='["https://app.example.com"]'
    """

    # Application metadata
    app_name: str = "Client API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str = "postgresql+asyncpg://localhost/clients"
    database_echo: bool = False

    # Nested settings groups
    validation: ValidationSettings = ValidationSettings()
    cors: CorsSettings = CorsSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
