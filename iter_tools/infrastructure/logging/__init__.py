"""Logging infrastructure package."""

from iter_tools.infrastructure.logging.logger import (
    LIBRARY_LOGGER_NAME,
    DetailedFormatter,
    get_logger,
    setup_logging,
)

__all__: list[str] = [
    "LIBRARY_LOGGER_NAME",
    "DetailedFormatter",
    "get_logger",
    "setup_logging",
]
