"""
Storefront Backend - Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment mode:
    ENVIRONMENT (NODE_ENV is accepted as well) selects between "development"
    and anything else. Only development mode exposes stack traces in API fault
    responses.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running the demo locally.
    Attributes are grouped by concern for readability.
    """

    # ── Runtime Environment ───────────────────────────────────────────────
    environment: str = Field(
        default="production",
        validation_alias=AliasChoices("environment", "node_env"),
        description="Runtime mode: development, production, test, ...",
    )

    # ── Catalog ───────────────────────────────────────────────────────────
    # What: Number of synthetic products generated at startup
    product_count: int = Field(default=20, ge=1, le=1000)

    # What: Seed for the fake data generator; unseeded when absent so every
    # process start produces a different catalog
    product_seed: Optional[int] = Field(default=None)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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
    def is_development(self) -> bool:
        """True when fault responses may carry stack traces."""
        return self.environment.strip().lower() == "development"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # ENVIRONMENT and environment both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
