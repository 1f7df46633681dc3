"""Configuration schemas."""

from .app_schema import IterToolsConfig
from .logging_schema import FileLoggingConfig, LoggingConfig

__all__ = [
    "IterToolsConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
