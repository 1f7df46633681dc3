"""Configuration package with clean public API."""

from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel
from .manager import ConfigurationManager
from .schemas import FileLoggingConfig, IterToolsConfig, LoggingConfig

__all__ = [
    "DEFAULT_CONFIG",
    "LogLevel",
    "LogDestination",
    "IterToolsConfig",
    "LoggingConfig",
    "FileLoggingConfig",
    "ConfigurationManager",
]
