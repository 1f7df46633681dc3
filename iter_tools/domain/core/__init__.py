"""Core domain types: exceptions, comparison operators, and common types."""

from iter_tools.domain.core.common_types import Key, Pair, SequenceRef
from iter_tools.domain.core.comparison import ComparisonOperator
from iter_tools.domain.core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    ItemNotFoundError,
    IterToolsError,
    MultipleItemsFoundError,
    UnrecognizedComparisonOperatorError,
)

__all__ = [
    "Key",
    "Pair",
    "SequenceRef",
    "ComparisonOperator",
    "IterToolsError",
    "ItemNotFoundError",
    "MultipleItemsFoundError",
    "UnrecognizedComparisonOperatorError",
    "InvalidArgumentError",
    "ConfigurationError",
]
