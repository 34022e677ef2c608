"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Encoder configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "staging", "prod"] = "dev"

    # Symbol geometry handed to the renderer
    module_height: int = Field(32, ge=1, description="Symbol height in modules")
    pack_word_width: int = Field(24, ge=1, description="Modules packed per transport word")

    # Rendering
    render_scale: int = Field(2, ge=1, description="Pixels per module")
    render_quiet_zone: int = Field(0, ge=0, description="White modules added on each side")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
