"""Configuration models for archor."""

from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Optional log file")
    rotation: str = Field(default="50 MB", description="Log rotation size/time")
    retention: str = Field(default="30 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class ValidationConfig(BaseModel):
    """Validation engine configuration."""

    fail_fast: bool = Field(
        default=False, description="Stop at the first failure instead of collecting all"
    )


class ArchorConfig(BaseModel):
    """Complete archor configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
