"""Enumeration model shared by every collection function.

A *sequence* is an ordered run of ``(key, value)`` pairs:

- ``None`` is the empty sequence;
- a ``Mapping`` yields ``mapping.items()``;
- any other iterable (except strings, bytes and pydantic models) yields
  ``enumerate(iterable)``.

Everything else is a *record* (or scalar) and is not enumerable.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel

from iter_tools.domain.core.common_types import Pair
from iter_tools.domain.core.exceptions import InvalidArgumentError

_SCALAR_ITERABLES = (str, bytes, bytearray)


def is_enumerable(value: Any) -> bool:
    """
    Check whether a value can be traversed as a sequence of pairs.

    Args:
        value: Value to check

    Returns:
        True for None, mappings and non-string iterables
    """
    if value is None:
        return True
    if isinstance(value, (_SCALAR_ITERABLES, BaseModel)):
        return False
    return isinstance(value, Iterable)


def is_record(value: Any) -> bool:
    """Check whether a value is a plain record (accessed by attribute, not by pair)."""
    return not is_enumerable(value)


def to_pairs(sequence: Any) -> List[Pair]:
    """
    Materialize a sequence into its ordered ``(key, value)`` pairs.

    Args:
        sequence: Sequence, or None

    Returns:
        List of pairs in traversal order

    Raises:
        InvalidArgumentError: If the value is not enumerable
    """
    if sequence is None:
        return []
    if isinstance(sequence, Mapping):
        return list(sequence.items())
    if not is_enumerable(sequence):
        type_name = type(sequence).__name__
        raise InvalidArgumentError(f"Expected an enumerable sequence, {type_name} given.", type_name)
    return list(enumerate(sequence))


def pack(pairs: Sequence[Pair]) -> Union[List[Any], Dict[Any, Any]]:
    """
    Build a key-preserving result.

    Args:
        pairs: Pairs in traversal order

    Returns:
        A list when the keys are exactly 0..n-1 in order, otherwise a dict
    """
    if all(type(key) is int and key == position for position, (key, _) in enumerate(pairs)):
        return [value for _, value in pairs]
    return dict(pairs)


def unchanged(sequence: Any, pairs: Sequence[Pair]) -> Any:
    """
    Return the caller's sequence as-is.

    None becomes an empty list, and one-shot iterators (already consumed by
    ``to_pairs``) are replaced by their packed pairs.
    """
    if sequence is None:
        return []
    if isinstance(sequence, Iterator):
        return pack(pairs)
    return sequence
