"""
Runtime configuration for folder-cascade.

Settings are read from the environment (prefix ``CASCADE_``) or a local
``.env`` file and cached for the lifetime of the process.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CascadeSettings(BaseSettings):
    """Settings for the cascade service and its stores."""

    model_config = SettingsConfigDict(
        env_prefix="CASCADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="folder-cascade")
    environment: str = Field(default="development")

    # Ordering against the host's own ownership save
    settle_delay_seconds: float = Field(
        default=0.25,
        ge=0,
        description="Fixed wait before traversal when the host gives no completion signal"
    )
    save_signal_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Upper bound on waiting for the host's save completion signal"
    )

    # Database (in-memory store is used when unset)
    database_url: Optional[str] = Field(default=None)
    db_schema: str = Field(default="public")
    db_pool_min_size: int = Field(default=1, ge=1)
    db_pool_max_size: int = Field(default=10, ge=1)

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    @property
    def uses_database(self) -> bool:
        """Check if a PostgreSQL store is configured."""
        return bool(self.database_url)


@lru_cache()
def get_settings() -> CascadeSettings:
    """Get cached settings instance."""
    return CascadeSettings()
