"""Logging configuration schemas."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from iter_tools.config.defaults import LogDestination, LogLevel


class FileLoggingConfig(BaseModel):
    """Rotating log file settings."""

    path: Optional[str] = Field(None, description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb")
    @classmethod
    def validate_max_size(cls, v: int) -> int:
        """Validate maximum file size."""
        if v < 1:
            raise ValueError("Maximum log file size must be at least 1 MB")
        return v

    @field_validator("backup_count")
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        """Validate backup count."""
        if v < 0:
            raise ValueError("Backup count cannot be negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Log level for the iter_tools logger")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records are written")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string",
    )
    file: FileLoggingConfig = Field(default_factory=lambda: FileLoggingConfig())

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @model_validator(mode="after")
    def validate_file_destination(self) -> "LoggingConfig":
        """A file destination needs a file path."""
        if self.destination in (LogDestination.FILE, LogDestination.BOTH) and not self.file.path:
            raise ValueError(f"Log destination '{self.destination.value}' requires file.path")
        return self
