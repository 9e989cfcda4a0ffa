"""
Centralized configuration for the Catalog backend.

All settings are loaded from environment variables with sensible defaults.
Variable names match the deployment environment (DB_HOST, JWT_KEY, ...).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Catalog API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings (single origin, cookies allowed)
    cors_origin: str = "http://localhost:3000"
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Database
    database_url: str = ""  # Overrides the DB_* fields when set
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "catalog"
    db_pool_size: int = 10
    db_pool_timeout: float = 30.0  # seconds

    # Per-session settings applied on every checkout
    db_sql_mode: str = "TRADITIONAL"
    db_time_zone: str = "-8:00"

    # Tokens
    jwt_key: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_in: Optional[int] = None  # seconds; tokens never expire when unset

    # Passwords
    bcrypt_rounds: int = 10

    # Reject protected requests that fail the auth gate instead of
    # letting them through to the handler.
    auth_enforce: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
