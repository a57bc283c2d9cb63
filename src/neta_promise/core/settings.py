"""Application settings and configuration.

This module defines all configuration options for the Neta Promise application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    This class defines all configuration options for the Neta Promise application.
    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Neta Promise", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./neta_promise.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Admin console credentials (single account, no roles)
    admin_email: str | None = Field(default=None, alias="ADMIN_EMAIL")
    admin_password: str | None = Field(default=None, alias="ADMIN_PASSWORD")
    admin_page_size: int = Field(default=10, alias="ADMIN_PAGE_SIZE")

    # JWT authentication settings
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 8,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Voting rules
    daily_vote_limit: int = Field(default=30, alias="DAILY_VOTE_LIMIT")
    vote_timezone: str = Field(default="UTC", alias="VOTE_TIMEZONE")

    # Feed pagination and ad rotation
    feed_page_size: int = Field(default=8, alias="FEED_PAGE_SIZE")
    feed_max_page_size: int = Field(default=20, alias="FEED_MAX_PAGE_SIZE")
    ad_pool_size: int = Field(default=20, alias="AD_POOL_SIZE")
    ad_interval: int = Field(default=4, alias="AD_INTERVAL")

    # Anonymous voter cookie
    anon_cookie_name: str = Field(default="anon_id", alias="ANON_COOKIE_NAME")
    anon_cookie_max_age: int = Field(default=60 * 60 * 24 * 365, alias="ANON_COOKIE_MAX_AGE")
    anon_cookie_httponly: bool = Field(default=True, alias="ANON_COOKIE_HTTPONLY")
    cookie_secure: bool = Field(default=False, alias="COOKIE_SECURE")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def admin_configured(self) -> bool:
        """Return True when both admin credentials are present."""
        return bool(self.admin_email and self.admin_password)


settings = Settings()  # type: ignore[call-arg]
