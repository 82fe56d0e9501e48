"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Environment variables are prefixed with TRAILSPLIT_.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="WARNING", description="Logging level")

    # === Storage ===
    settings_file: Path = Field(
        default_factory=lambda: Path.home() / ".trailsplit" / "settings.json",
        description="Key-value file holding effort settings"
    )
    project_dir: Path = Field(
        default=Path("."),
        description="Default directory for exported project files"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="TRAILSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
