"""Collection filtering and searching utility functions."""

from typing import Any, Callable, Optional

from iter_tools.domain.core.exceptions import (
    InvalidArgumentError,
    ItemNotFoundError,
    MultipleItemsFoundError,
)
from iter_tools.infrastructure.logging.logger import get_logger

from .enumeration import is_enumerable, pack, to_pairs
from .equality import loose_equals, strict_equals
from .invocation import arity_adapter
from .lookup import get, has, resolve_default
from .validation import count, is_truthy

logger = get_logger(__name__)


def filter_(collection: Any, predicate: Optional[Callable[..., Any]] = None) -> Any:
    """
    Filter a collection, keeping the items the predicate holds for.

    Keys are NOT re-indexed: filtering ``[1, 0, 2]`` gives ``{0: 1, 2: 2}``.
    Use ``values`` on the result to re-key it.

    Args:
        collection: Collection, or None
        predicate: Function of (value, key); defaults to the value's truthiness

    Returns:
        The kept items with their original keys
    """
    test = arity_adapter(predicate) if predicate is not None else (lambda value, key: value)
    return pack([(key, value) for key, value in to_pairs(collection) if is_truthy(test(value, key))])


def first(collection: Any, predicate: Optional[Callable[..., Any]] = None, default: Any = None) -> Any:
    """
    Get the first item, or the first item matching a predicate.

    Args:
        collection: Collection, or None
        predicate: Optional function of (value, key)
        default: Value returned when nothing matches; callables are invoked

    Returns:
        The first matching value, or the resolved default
    """
    test = arity_adapter(predicate) if predicate is not None else (lambda value, key: True)
    for key, value in to_pairs(collection):
        if is_truthy(test(value, key)):
            return value
    return resolve_default(default)


def contains(collection: Any, test_or_key: Any, value: Any = None) -> bool:
    """
    Test whether a collection contains something.

    There are 3 distinct modes:

    1) A predicate: ``contains(items, lambda value, key: ...)`` is True if it
       holds for some item.
    2) A literal: ``contains(items, 3)`` is True if some value loosely equals it.
    3) A key/value pair: ``contains(items, "a", 1)`` is True if key "a" exists
       and its value loosely equals 1. A missing key gives False.

    Mode 3 is used only when ``value`` is not None.

    Args:
        collection: Collection, or None
        test_or_key: Predicate, literal, or (in mode 3) an int or str key
        value: Value expected at ``test_or_key``

    Returns:
        True if the collection contains the item

    Raises:
        InvalidArgumentError: If mode 3 is given a key that is not an int or str
    """
    if value is not None:
        if isinstance(test_or_key, bool) or not isinstance(test_or_key, (int, str)):
            type_name = type(test_or_key).__name__
            logger.debug("contains rejected key", key_type=type_name)
            raise InvalidArgumentError(
                f"contains must be given an integer or string for the key, {type_name} given.",
                type_name,
            )

        for key, item in to_pairs(collection):
            if strict_equals(key, test_or_key):
                return loose_equals(item, value)
        return False

    if callable(test_or_key):
        matcher = arity_adapter(test_or_key)
    else:
        def matcher(item: Any, key: Any) -> bool:
            return loose_equals(item, test_or_key)

    return any(is_truthy(matcher(item, key)) for key, item in to_pairs(collection))


def some(collection: Any, test_or_key: Any, value: Any = None) -> bool:
    """Alias for contains."""
    return contains(collection, test_or_key, value)


def sole(collection: Any, criterion: Any = None) -> Any:
    """
    Return the only item of a collection that matches a criterion.

    There are 3 distinct modes:

    1) No criterion: the collection must hold exactly one item, which is
       returned.
    2) A callable of (value, key): exactly one item must satisfy it.
    3) A key/value pair (e.g. ``{"id": 5}``): the collection must hold at
       most one item, that key must exist, and its value must be strictly
       equal to the criterion's value.

    Args:
        collection: Collection, or None
        criterion: None, a predicate, or a key/value pair

    Returns:
        The sole matching value (which may itself be None, False or 0)

    Raises:
        ItemNotFoundError: If nothing matches, or the criterion has an unknown shape
        MultipleItemsFoundError: If more than one item matches
    """
    pairs = to_pairs(collection)

    if criterion is None:
        total = count(pairs)
        if total == 0:
            logger.debug("sole found no items", mode="list")
            raise ItemNotFoundError()
        if total > 1:
            logger.debug("sole found multiple items", mode="list", count=total)
            raise MultipleItemsFoundError()
        return pairs[0][1]

    if callable(criterion):
        matcher = arity_adapter(criterion)
        found_item = None
        was_item_found = False  # Tracked separately because None may be the item we're looking for
        for key, value in pairs:
            if is_truthy(matcher(value, key)):
                if was_item_found:
                    logger.debug("sole found multiple items", mode="predicate", key=key)
                    raise MultipleItemsFoundError()
                found_item = value
                was_item_found = True

        if not was_item_found:
            logger.debug("sole found no items", mode="predicate")
            raise ItemNotFoundError()
        return found_item

    if is_enumerable(criterion):
        total = count(pairs)
        if total > 1:
            logger.debug("sole rejected key/value lookup on multiple items", mode="pair", count=total)
            raise ItemNotFoundError()

        source = pack(pairs)
        for criterion_key, criterion_value in to_pairs(criterion):
            if not has(source, criterion_key):
                logger.debug("sole key not found", mode="pair", key=criterion_key)
                raise ItemNotFoundError()

            found_item = get(source, criterion_key)
            if not strict_equals(found_item, criterion_value):
                logger.debug("sole value mismatch", mode="pair", key=criterion_key)
                raise ItemNotFoundError()
            return found_item

    logger.debug("sole criterion has no usable shape", criterion_type=type(criterion).__name__)
    raise ItemNotFoundError()
