"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Library settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DOMWEAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Element factory
    skip_zero_index: bool = Field(
        default=False, description="Treat a position index of 0 as absent (legacy behaviour)"
    )

    # Blueprints
    max_blueprint_size: int = Field(default=512 * 1024, gt=0, description="Max blueprint JSON size (bytes)")
    max_blueprint_depth: int = Field(default=40, gt=0, description="Max blueprint nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
