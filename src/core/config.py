"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Parser settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="RIVE_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Blueprint discovery
    max_definition_scan: int = Field(
        default=200, gt=0, description="Scan bound when the runtime reports no definition count"
    )
    max_consecutive_scan_failures: int = Field(
        default=3, gt=0, description="Consecutive empty/failed lookups before discovery stops"
    )

    # Instance resolution
    max_nesting_depth: int = Field(
        default=32, gt=0, description="Deepest nested view-model level that is parsed"
    )

    # State machine calibration
    calibration_artboard: str | None = Field(
        default=None, description="Artboard sampled for input type calibration"
    )
    calibration_state_machine: str | None = Field(
        default=None, description="State machine sampled for input type calibration"
    )

    # Loading
    load_timeout: float = Field(
        default=30.0, gt=0, description="Seconds to wait for the runtime to report load completion"
    )

    # Output validation
    max_document_depth: int = Field(
        default=256, gt=0, description="Max nesting depth accepted for the output document"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
