"""Collection utility functions organized by responsibility."""

from iter_tools.infrastructure.utilities.common.collections.conditional import (
    when,
    when_empty,
    when_not_empty,
)
from iter_tools.infrastructure.utilities.common.collections.enumeration import (
    is_enumerable,
    is_record,
    to_pairs,
)
from iter_tools.infrastructure.utilities.common.collections.equality import (
    is_numeric_string,
    loose_compare,
    loose_equals,
    strict_equals,
)
from iter_tools.infrastructure.utilities.common.collections.filtering import (
    contains,
    filter_,
    first,
    sole,
    some,
)
from iter_tools.infrastructure.utilities.common.collections.lookup import get, has
from iter_tools.infrastructure.utilities.common.collections.positional import (
    skip,
    slice_,
    take,
)
from iter_tools.infrastructure.utilities.common.collections.querying import (
    where,
    where_strict,
)
from iter_tools.infrastructure.utilities.common.collections.transforming import (
    deep_merge_dicts,
    each,
    keys,
    map_,
    pop,
    pop_from,
    push,
    reduce,
    to_list,
    values,
)
from iter_tools.infrastructure.utilities.common.collections.validation import (
    count,
    every,
    is_empty,
    is_falsy,
    is_not_empty,
    is_truthy,
)

# Export commonly used functions
__all__ = [
    # Enumeration
    "is_enumerable",
    "is_record",
    "to_pairs",
    # Value semantics
    "is_falsy",
    "is_truthy",
    "is_numeric_string",
    "loose_equals",
    "strict_equals",
    "loose_compare",
    # Primitives
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
    "deep_merge_dicts",
    # Positional access
    "take",
    "skip",
    "slice_",
    # Lookup
    "get",
    "has",
    # Query combinators
    "first",
    "contains",
    "some",
    "every",
    "sole",
    "where",
    "where_strict",
    # Conditional application
    "when",
    "when_empty",
    "when_not_empty",
]
