"""
Configuration module for the Health Tracker service.
Uses Pydantic BaseSettings for validation - app fails fast on malformed config.
"""
import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with validation.

    Values are read from the environment (or a local .env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database Configuration
    tracker_db_dir: str = Field(default="data", description="Database directory")
    tracker_db_file: str = Field(default="health_tracker.db", description="Database filename")
    tracker_db_busy_timeout: int = Field(default=5000, ge=0, description="SQLite busy timeout in milliseconds")

    # API Configuration
    tracker_host: str = Field(default="0.0.0.0", description="API host")
    tracker_port: int = Field(default=8000, description="API port")
    tracker_reload: bool = Field(default=False, description="Enable hot reload")

    # Caller identity used when a request carries no principal header
    tracker_anonymous_principal: str = Field(
        default="2vxsx-fae",
        min_length=1,
        description="Principal recorded for callers that do not identify themselves",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="json", description="Log format: 'json' or 'text'")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in {"json", "text"}:
            raise ValueError(f"Unsupported log format: {value}")
        return fmt

    @property
    def database_path(self) -> str:
        """Get the full database path."""
        return str(Path(self.tracker_db_dir) / self.tracker_db_file)

    def ensure_directories(self) -> None:
        """Ensure the database directory exists."""
        Path(self.tracker_db_dir).mkdir(parents=True, exist_ok=True)


# Global settings instance - fails fast on invalid configuration
settings = Settings()

# Module-level exports for code that imports constants directly
DATABASE_PATH = settings.database_path
DATABASE_BUSY_TIMEOUT = settings.tracker_db_busy_timeout

API_HOST = settings.tracker_host
API_PORT = settings.tracker_port
API_RELOAD = settings.tracker_reload
