"""Keyed lookup utility functions."""

from collections.abc import Iterable, Mapping
from typing import Any, List

from .enumeration import is_enumerable, is_record, to_pairs
from .equality import strict_equals
from .validation import is_falsy


def resolve_default(default: Any) -> Any:
    """
    Resolve a default value.

    Args:
        default: Value, or a zero-argument callable producing it

    Returns:
        ``default()`` for callables, otherwise ``default`` itself
    """
    return default() if callable(default) else default


def get(container: Any, key: Any, default: Any = None) -> Any:
    """
    Get a value by key from a collection or a record.

    - An empty container (None, [], {}, 0, "", ...) yields the default.
    - A record (dataclass, pydantic model, plain object) is read by attribute.
    - A collection is scanned for a key strictly equal to ``key``.

    Args:
        container: Collection or record
        key: Key or attribute name
        default: Value returned on a miss; callables are invoked (lazily)

    Returns:
        The value found, or the resolved default
    """
    if is_falsy(container):
        return resolve_default(default)

    if is_record(container):
        if isinstance(key, str) and hasattr(container, key):
            return getattr(container, key)
        return resolve_default(default)

    for item_key, value in to_pairs(container):
        if strict_equals(item_key, key):
            return value

    return resolve_default(default)


def _requested_keys(key_or_keys: Any) -> List[Any]:
    if isinstance(key_or_keys, Mapping):
        return list(key_or_keys.keys())
    if is_enumerable(key_or_keys) and isinstance(key_or_keys, Iterable):
        return list(key_or_keys)
    return [key_or_keys]


def has(collection: Any, key_or_keys: Any) -> bool:
    """
    Test whether a collection has a key, or all of several keys.

    Args:
        collection: Collection, or None
        key_or_keys: A key, or an iterable of keys (a mapping contributes its keys)

    Returns:
        True if every requested key is present; True when no keys are requested
    """
    present = [item_key for item_key, _ in to_pairs(collection)]

    for desired_key in _requested_keys(key_or_keys):
        if not any(strict_equals(item_key, desired_key) for item_key in present):
            return False

    return True
