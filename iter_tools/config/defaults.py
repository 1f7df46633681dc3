# iter_tools/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


DEFAULT_CONFIG = {
    "version": "1.0",

    # Logging configuration
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        "file": {
            "path": None,
            "max_size_mb": 10,
            "backup_count": 5
        }
    }
}
