"""Configuration management for schemakit."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import Environment

TRUTHY_VALUES = ("true", "1", "yes", "on")


class Settings(BaseModel):
    """Library settings."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development/production/testing)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_use_colors: bool = Field(
        default=True, description="Whether console logs are colored"
    )
    log_to_file: bool = Field(
        default=False, description="Whether logs are also written to a file"
    )
    log_dir: str = Field(default="logs", description="Directory for log files")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    return Settings(
        environment=Environment(os.getenv("SCHEMAKIT_ENV", "development")),
        log_level=os.getenv("SCHEMAKIT_LOG_LEVEL", "INFO").upper(),
        log_use_colors=_env_flag("SCHEMAKIT_LOG_COLORS", "true"),
        log_to_file=_env_flag("SCHEMAKIT_LOG_TO_FILE", "false"),
        log_dir=os.getenv("SCHEMAKIT_LOG_DIR", "logs"),
    )
