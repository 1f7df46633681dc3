# iter_tools/domain/core/exceptions.py
from typing import Any, List, Optional


class IterToolsError(Exception):
    """Base exception for all iter_tools errors."""
    pass


class ItemNotFoundError(IterToolsError):
    """Raised when no item matches where exactly one was required."""
    def __init__(self, message: str = "No items were found matching your criteria."):
        super().__init__(message)


class MultipleItemsFoundError(IterToolsError):
    """Raised when more than one item matches where exactly one was required."""
    def __init__(self, message: str = "Too many items were found matching your criteria."):
        super().__init__(message)


class UnrecognizedComparisonOperatorError(IterToolsError):
    """Raised when a comparison operator token is outside the known set."""
    def __init__(self, operator: Any):
        super().__init__(f"Unrecognized comparison operator detected: {operator!r}")
        self.operator = operator


class InvalidArgumentError(IterToolsError):
    """Raised when an argument has the wrong shape for the requested operation."""
    def __init__(self, message: str, argument_type: Optional[str] = None):
        super().__init__(message)
        self.argument_type = argument_type


class ConfigurationError(IterToolsError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []
