"""
Record store configuration settings.

Manages the SQL connection backing the alumni record store.
Either a full DATABASE_URL or the individual POSTGRES_* parts.

Dependencies: pydantic, pydantic_settings
System role: Record store connection configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection configuration for the record store."""

    model_config = SettingsConfigDict(env_prefix="POSTGRES_")

    url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL"),
        description="Full async SQLAlchemy URL; overrides the individual parts",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="alumni", description="PostgreSQL database name")
    sslmode: str = Field(default="prefer", description="SSL mode (require enables TLS)")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Construct async connection URL.

        Returns:
            str: DATABASE_URL when set, else a postgresql+asyncpg URL
        """
        if self.url:
            return self.url
        ssl_param = "?ssl=require" if self.sslmode == "require" else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}{ssl_param}"
        )

    @property
    def is_sqlite(self) -> bool:
        """SQLite URLs do not accept pool sizing arguments."""
        return self.async_database_url.startswith("sqlite")
