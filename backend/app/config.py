"""
QuickNotes Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the store, and the process entry point.
When:  Loaded once at module import time.

Store connection:
    The five DB_* variables describe a PostgreSQL server. DATABASE_URL, when
    set, replaces them entirely (used for SQLite in tests and for deployments
    that hand out a single DSN).
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="localhost", description="Store host")
    db_port: int = Field(default=5432, ge=1, le=65535, description="Store port")
    db_user: str = Field(default="app_user", description="Store user")
    db_password: str = Field(default="app_pass", description="Store password")
    db_name: str = Field(default="notes_db", description="Database name")

    # Full SQLAlchemy URL; overrides the DB_* fields above when set
    database_url: Optional[str] = Field(default=None)

    # Bounded pool: at most db_pool_size + db_max_overflow connections
    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" allows any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def store_url(self) -> URL:
        """
        The effective SQLAlchemy URL for the note store.

        Built with URL.create so user names and passwords containing
        reserved characters ('@', ':', '/') are escaped correctly.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


settings = Settings()
