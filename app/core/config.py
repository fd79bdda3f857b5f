"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for write-heavy endpoints (maturity run).
        cron_secret: Bearer token required by the maturity trigger.
            Leave unset to accept unauthenticated triggers (local use).
        maturity_interval_seconds: Period of the background maturity job.
            Zero disables the in-process scheduler.
        default_trading_pair: Pair used when a market view omits the symbol.
        order_book_default_limit: Entries per side when no limit is given.
        order_book_max_limit: Upper bound accepted for any market view limit.

    Database settings: either an explicit `DATABASE_URL` or the postgres_*
    parts from which a DSN is composed.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "CoinVest"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"

    cron_secret: Optional[str] = None
    maturity_interval_seconds: int = 300

    default_trading_pair: str = "BNX/USDT"
    order_book_default_limit: int = 20
    order_book_max_limit: int = 100

    database_url: Optional[str] = None
    db_echo: bool = False
    db_pool_size: int = 5
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "coinvest"

    def get_database_dsn(self) -> str:
        """Return the effective SQLAlchemy DSN.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build DSN from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
