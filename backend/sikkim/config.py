"""
Sikkim Tourism Backend — Application Configuration
====================================================

What:  Centralized configuration using Pydantic Settings.
How:   Pydantic Settings reads environment variables (or a .env file),
       coerces types and validates ranges. One `Settings` instance is built
       at startup and handed to `create_app()`, which stores it on
       `app.state.settings` for handlers and dependencies.
Who:   The application factory, the `sikkim-server` entry point and tests.
When:  Constructed once per application; never mutated afterwards.

Environment variables:
    PORT          Listening port                      (default: 4000)
    HOST          Bind address                        (default: 0.0.0.0)
    ADMIN_TOKEN   Shared secret for admin endpoints   (default: change-me-to-a-secure-token)
    DB_PATH       SQLite database file                (default: ./sikkim.db)
    PUBLIC_DIR    Prebuilt static site root           (default: ./sikkim-tourism-website)
    LOG_LEVEL     Root logging level                  (default: INFO)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments MUST
    override ADMIN_TOKEN.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000, ge=1, le=65535)

    # ── Access Control ────────────────────────────────────────────────────
    # Compared verbatim against the X-ADMIN-TOKEN header / admin_token query param
    admin_token: str = Field(
        default="change-me-to-a-secure-token",
        description="Shared secret required by protected endpoints",
    )

    # ── Database ──────────────────────────────────────────────────────────
    # Relative paths resolve against the process working directory
    db_path: str = Field(default="./sikkim.db", description="SQLite database file")

    # ── Static Site ───────────────────────────────────────────────────────
    public_dir: str = Field(
        default="./sikkim-tourism-website",
        description="Directory served at / when it exists",
    )
    entry_document: str = Field(
        default="index.html",
        description="Document returned for unmatched non-API paths (SPA fallback)",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" allows any origin
    cors_origins: str = Field(default="*")

    # ── Logging ───────────────────────────────────────────────────────────
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

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the configured SQLite file."""
        return f"sqlite+aiosqlite:///{self.db_path}"

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # ADMIN_TOKEN and admin_token both work
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Default settings for the module-level app and the CLI entry point."""
    return Settings()
