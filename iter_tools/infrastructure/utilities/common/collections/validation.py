"""Collection validation utility functions."""

from collections.abc import Sized
from numbers import Number
from typing import Any, Callable, Optional

from .enumeration import is_enumerable, to_pairs
from .invocation import arity_adapter


def is_falsy(value: Any) -> bool:
    """
    Check a value against the weak-emptiness rule.

    None, False, numeric zero, "", "0", b"", b"0" and any sized value of
    length 0 are falsy. Everything else, including arbitrary objects, is
    truthy.

    Args:
        value: Value to check

    Returns:
        True if the value is falsy
    """
    if value is None or value is False:
        return True
    if value is True:
        return False
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, (bytes, bytearray)):
        return value in (b"", b"0")
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_truthy(value: Any) -> bool:
    """Negation of is_falsy."""
    return not is_falsy(value)


def count(collection: Any) -> int:
    """
    Count the pairs in a collection.

    Args:
        collection: Collection to count, or None

    Returns:
        Number of items; None counts as 0. None items still count as items.
    """
    if isinstance(collection, Sized) and is_enumerable(collection):
        return len(collection)
    return len(to_pairs(collection))


def is_empty(collection: Any) -> bool:
    """
    Check if collection has no items.

    Args:
        collection: Collection to check, or None

    Returns:
        True if collection is empty
    """
    return count(collection) == 0


def is_not_empty(collection: Any) -> bool:
    """
    Check if collection has at least one item.

    Args:
        collection: Collection to check, or None

    Returns:
        True if collection is not empty
    """
    return not is_empty(collection)


def every(collection: Any, predicate: Optional[Callable[..., Any]] = None) -> bool:
    """
    Check if every item satisfies a predicate.

    Args:
        collection: Collection to check, or None
        predicate: Function of (value, key); defaults to the value's truthiness

    Returns:
        True if all items match (vacuously True for an empty collection)
    """
    test = arity_adapter(predicate) if predicate is not None else (lambda value, key: value)
    return all(is_truthy(test(value, key)) for key, value in to_pairs(collection))
