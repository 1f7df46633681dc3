"""iter_tools - Root Package.

This package provides one family of collection functions that works the same
way over lists, tuples, dicts (any ``Mapping``) and arbitrary iterables. Every
input is read as an ordered sequence of ``(key, value)`` pairs, and ``None``
is accepted everywhere as the empty sequence.

Key Components:
    - domain: Exceptions, comparison operators and shared types
    - config: Default configuration, pydantic schemas and the configuration manager
    - infrastructure: Logging, file readers and the collection functions

Example:
    >>> from iter_tools import where, sole
    >>> records = [{"id": 1}, {"id": 2}, {"id": 3}]
    >>> where(records, "id", ">", 1)
    [{'id': 2}, {'id': 3}]
    >>> sole(records, lambda record: record["id"] == 2)
    {'id': 2}
"""

from ._version import __version__
from ._package import PACKAGE_NAME

from iter_tools.config import ConfigurationManager, IterToolsConfig, LoggingConfig
from iter_tools.domain.core import (
    ComparisonOperator,
    ConfigurationError,
    InvalidArgumentError,
    ItemNotFoundError,
    IterToolsError,
    MultipleItemsFoundError,
    SequenceRef,
    UnrecognizedComparisonOperatorError,
)
from iter_tools.infrastructure.logging import get_logger, setup_logging
from iter_tools.infrastructure.utilities.common.collections import (
    contains,
    count,
    each,
    every,
    filter_,
    first,
    get,
    has,
    is_empty,
    is_falsy,
    is_not_empty,
    is_truthy,
    keys,
    loose_compare,
    loose_equals,
    map_,
    pop,
    pop_from,
    push,
    reduce,
    skip,
    slice_,
    sole,
    some,
    strict_equals,
    take,
    to_list,
    values,
    when,
    when_empty,
    when_not_empty,
    where,
    where_strict,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "__version__",
    # Collection functions
    "count",
    "is_empty",
    "is_not_empty",
    "values",
    "keys",
    "to_list",
    "map_",
    "filter_",
    "each",
    "reduce",
    "push",
    "pop",
    "pop_from",
    "take",
    "skip",
    "slice_",
    "get",
    "has",
    "first",
    "contains",
    "some",
    "every",
    "sole",
    "where",
    "where_strict",
    "when",
    "when_empty",
    "when_not_empty",
    # Value semantics
    "is_falsy",
    "is_truthy",
    "loose_equals",
    "strict_equals",
    "loose_compare",
    # Domain
    "ComparisonOperator",
    "SequenceRef",
    "IterToolsError",
    "ItemNotFoundError",
    "MultipleItemsFoundError",
    "UnrecognizedComparisonOperatorError",
    "InvalidArgumentError",
    "ConfigurationError",
    # Configuration and logging
    "ConfigurationManager",
    "IterToolsConfig",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
]
