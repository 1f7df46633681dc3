"""Positional access utility functions.

Results keep the keys of the source collection (see ``enumeration.pack``).
"""

from collections.abc import Iterator
from typing import Any, Optional

from .enumeration import pack, to_pairs, unchanged
from .validation import count


def take(collection: Any, length: int) -> Any:
    """
    Take the first ``length`` items of a collection.

    If the collection has ``length`` items or fewer, it is returned as-is
    (the same object, not a copy).

    Args:
        collection: Collection, or None
        length: How many items to keep; negative values count as 0

    Returns:
        The leading items with their original keys
    """
    if length <= 0:
        return []

    pairs = to_pairs(collection)
    if len(pairs) <= length:
        return unchanged(collection, pairs)
    return pack(pairs[:length])


def skip(collection: Any, length: int) -> Any:
    """
    Skip the first ``length`` items of a collection.

    Args:
        collection: Collection, or None
        length: How many items to skip; zero or negative returns the input as-is

    Returns:
        The remaining items with their original keys
    """
    pairs = to_pairs(collection)
    if length <= 0:
        return unchanged(collection, pairs)
    return pack(pairs[length:])


def slice_(collection: Any, start: int, length: Optional[int] = None) -> Any:
    """
    Return a sub-section of a collection.

    Keys are preserved; use ``values`` to re-key the result.

    Args:
        collection: Collection, or None
        start: Position of the first item to keep
        length: Maximum number of items (default: everything after ``start``)

    Returns:
        ``take(skip(collection, start), length)``
    """
    if isinstance(collection, Iterator):
        collection = pack(to_pairs(collection))
    if length is None:
        length = count(collection)
    return take(skip(collection, start), length)
