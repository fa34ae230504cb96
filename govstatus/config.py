"""
Configuration management using pydantic-settings.
All settings loaded from environment variables (12-factor app).
"""

from datetime import date
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Australia Status", description="Display name of the feed")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_reload: bool = Field(default=True, description="Enable hot reload")
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="CORS allowed origins (comma-separated)",
    )

    # Logging
    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="json", description="Log format (json|console)")

    # Timeline
    tracking_start: date = Field(
        default=date(1975, 1, 1),
        description="Default observation window start",
    )
    uptime_display_precision: int = Field(
        default=6, ge=0, le=12, description="Decimal places for the uptime headline"
    )
    empty_window_policy: Literal["full", "raise"] = Field(
        default="full",
        description="Zero-length window handling: report 100% uptime or raise EmptyWindow",
    )

    # Status feed
    status_poll_interval_seconds: int = Field(
        default=60, ge=1, description="Advertised interval until the next status update"
    )

    # Catalog overrides (packaged JSON tables are used when unset)
    incident_catalog_path: Optional[str] = Field(
        default=None, description="Alternative incident table (JSON)"
    )
    service_catalog_path: Optional[str] = Field(
        default=None, description="Alternative service table (JSON)"
    )

    # Development
    dev_mode: bool = Field(default=True, description="Development mode")
    testing: bool = Field(default=False, description="Testing mode")

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v: str) -> List[str]:
        """Parse comma-separated CORS origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure singleton behavior.
    """
    return Settings()
