"""
Student Council API — Application Configuration
=================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the upload service and the `python -m council`
       entry point.
When:  Loaded once at module import time.

Environment variables (all optional):
    PORT                    TCP port uvicorn binds (default 3000)
    HOST                    Interface uvicorn binds (default 0.0.0.0)
    UPLOAD_DIR              Directory receiving uploaded blobs (default ./uploads)
    MAX_FILE_SIZE           Per-file byte limit (default 10 MiB)
    MAX_FILES_PER_REQUEST   Files accepted by one upload request (default 10)
    CORS_ORIGINS            Comma-separated allowed origins (default *)
    LOG_LEVEL               DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development; the only
    value most deployments change is PORT.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # ── File Storage ──────────────────────────────────────────────────────
    # Relative to the process CWD; created on application startup.
    upload_dir: str = Field(default="./uploads")

    # 10 MiB = 10 * 1024 * 1024
    max_file_size: int = Field(default=10_485_760, ge=1)
    max_files_per_request: int = Field(default=10, ge=1, le=100)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
