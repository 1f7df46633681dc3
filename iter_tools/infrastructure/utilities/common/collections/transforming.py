"""Collection transformation utility functions."""

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from iter_tools.domain.core.common_types import SequenceRef

from .enumeration import to_pairs, unchanged
from .invocation import arity_adapter

T = TypeVar("T")
K = TypeVar("K")
R = TypeVar("R")


def values(collection: Any) -> List[Any]:
    """
    Return the values of a collection, re-keyed from 0.

    This is useful to 'reset' the keys of a filtered collection, or to turn
    a mapping into a list.

    Args:
        collection: Collection, or None

    Returns:
        List of values in traversal order
    """
    return [value for _, value in to_pairs(collection)]


def to_list(collection: Any) -> List[Any]:
    """
    Convert any collection to a list of its values.

    Args:
        collection: Collection, or None

    Returns:
        List of values; an empty list for None
    """
    return values(collection)


def keys(collection: Any) -> List[Any]:
    """
    Return the keys of a collection in traversal order.

    Args:
        collection: Collection, or None

    Returns:
        List of keys (positions for lists, keys for mappings)
    """
    return [key for key, _ in to_pairs(collection)]


def map_(collection: Any, transform_func: Callable[..., R]) -> List[R]:
    """
    Transform every item of a collection.

    The input is never modified.

    Args:
        collection: Collection, or None
        transform_func: Function of (value, key)

    Returns:
        List with one result per item, in order
    """
    transform = arity_adapter(transform_func)
    return [transform(value, key) for key, value in to_pairs(collection)]


def reduce(collection: Any, reducer: Callable[..., T], initial_value: Any = None) -> T:
    """
    Reduce a collection to a single value.

    Args:
        collection: Collection, or None
        reducer: Function of (carry, value, key) returning the new carry
        initial_value: Carry for the first step (default: None)

    Returns:
        The final carry after every item has been reduced over
    """
    step = arity_adapter(reducer, fallback=2)
    carry = initial_value
    for key, value in to_pairs(collection):
        carry = step(carry, value, key)
    return carry


def each(collection: Any, callback: Callable[..., Any]) -> Any:
    """
    Call a function on every item, in order.

    Traversal stops as soon as the callback returns exactly ``False``.

    Args:
        collection: Collection, or None
        callback: Function of (value, key)

    Returns:
        The input collection, for chaining
    """
    visit = arity_adapter(callback)
    pairs = to_pairs(collection)
    for key, value in pairs:
        if visit(value, key) is False:
            break
    return unchanged(collection, pairs)


def push(collection: Any, item: Any) -> List[Any]:
    """
    Append an item to the end of a collection.

    The input is not modified. A collection passed as ``item`` is appended
    as a single item, not merged in.

    Args:
        collection: Collection, or None
        item: Item to append

    Returns:
        New list of the collection's values followed by the item
    """
    return [*values(collection), item]


def pop(collection: Any) -> Tuple[Any, Any]:
    """
    Remove the last item of a collection without modifying it.

    Args:
        collection: Collection, or None

    Returns:
        ``(last_value, remainder)`` where the remainder is re-keyed from 0.
        For an empty collection, ``(None, collection)`` (None becomes []).
    """
    pairs = to_pairs(collection)
    if not pairs:
        return None, unchanged(collection, pairs)
    return pairs[-1][1], [value for _, value in pairs[:-1]]


def pop_from(ref: SequenceRef) -> Any:
    """
    Remove the last item of the collection held by ``ref``.

    The remainder is stored back into ``ref.value``.

    Args:
        ref: Mutable cell holding the collection

    Returns:
        The removed value, or None if the collection was empty
    """
    item, ref.value = pop(ref.value)
    return item


def deep_merge_dicts(dict1: Dict[K, Any], dict2: Optional[Dict[K, Any]]) -> Dict[K, Any]:
    """
    Deep merge two dictionaries.

    Args:
        dict1: First dictionary
        dict2: Second dictionary; its values win

    Returns:
        Deep merged dictionary
    """
    result = copy.deepcopy(dict1)

    for key, value in (dict2 or {}).items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result
