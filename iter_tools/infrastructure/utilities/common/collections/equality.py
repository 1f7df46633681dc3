"""Loose and strict equality, and loose ordering.

Loose equality coerces across types:

1. None equals None.
2. If either side is a bool, both sides are compared by truthiness.
3. None against a string compares "" with the string.
4. None against anything else equals it when the other side is falsy.
5. Two numbers compare numerically.
6. A number and a numeric string compare numerically; a number and a
   non-numeric string compare as strings (the number's canonical form).
7. Two numeric strings compare numerically, other strings exactly.
8. Two sequences (lists, tuples, mappings) are equal when they have the
   same keys and every value pair is loosely equal.
9. A sequence never equals a non-sequence.
10. Anything else falls back to ``==``.

Strict equality requires identical types and values; lists, tuples and
mappings are compared element by element (mapping keys in order).
"""

import math
import re
from collections.abc import Mapping
from numbers import Number
from typing import Any

from iter_tools.domain.core.exceptions import InvalidArgumentError

from .enumeration import to_pairs
from .validation import is_truthy

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_INTEGER_STRING = re.compile(r"^\s*[+-]?\d+\s*$")

_ARRAY_TYPES = (list, tuple, Mapping)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def is_numeric_string(value: Any) -> bool:
    """Check whether a string holds a decimal or exponent number."""
    return isinstance(value, str) and _NUMERIC_STRING.match(value) is not None


def _to_number(value: str) -> Number:
    if _INTEGER_STRING.match(value):
        return int(value)
    return float(value)


def _number_to_string(value: Number) -> str:
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
    return str(value)


def _is_array(value: Any) -> bool:
    return isinstance(value, _ARRAY_TYPES)


def _sign(difference: bool, reverse: bool) -> int:
    return int(difference) - int(reverse)


def _native_compare(left: Any, right: Any) -> int:
    try:
        return _sign(left > right, left < right)
    except TypeError:
        left_type, right_type = type(left).__name__, type(right).__name__
        raise InvalidArgumentError(
            f"Cannot order {left_type} against {right_type}.", left_type
        ) from None


def loose_equals(left: Any, right: Any) -> bool:
    """
    Compare two values with type coercion.

    Args:
        left: First value
        right: Second value

    Returns:
        True if the values are loosely equal
    """
    if left is None and right is None:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return is_truthy(left) == is_truthy(right)
    if left is None or right is None:
        other = right if left is None else left
        if isinstance(other, str):
            return other == ""
        return not is_truthy(other)
    if _is_number(left) and _is_number(right):
        return left == right
    if _is_number(left) and isinstance(right, str):
        return _compare_number_with_string(left, right) == 0
    if isinstance(left, str) and _is_number(right):
        return _compare_number_with_string(right, left) == 0
    if isinstance(left, str) and isinstance(right, str):
        if is_numeric_string(left) and is_numeric_string(right):
            return _to_number(left) == _to_number(right)
        return left == right
    if _is_array(left) and _is_array(right):
        left_pairs = to_pairs(left)
        right_values = dict(to_pairs(right))
        if len(left_pairs) != len(right_values):
            return False
        for key, value in left_pairs:
            if key not in right_values or not loose_equals(value, right_values[key]):
                return False
        return True
    if _is_array(left) or _is_array(right):
        return False
    return left == right


def _compare_number_with_string(number: Number, text: str) -> int:
    if is_numeric_string(text):
        other = _to_number(text)
        if isinstance(number, float) and math.isnan(number):
            return 1
        return _native_compare(number, other)
    rendered = _number_to_string(number)
    return _sign(rendered > text, rendered < text)


def strict_equals(left: Any, right: Any) -> bool:
    """
    Compare two values requiring identical types.

    Args:
        left: First value
        right: Second value

    Returns:
        True if both values have the same type and are equal
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            strict_equals(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, Mapping):
        if len(left) != len(right):
            return False
        return all(
            strict_equals(left_key, right_key) and strict_equals(left_value, right_value)
            for (left_key, left_value), (right_key, right_value) in zip(left.items(), right.items())
        )
    return left == right


def loose_compare(left: Any, right: Any) -> int:
    """
    Order two values with the same coercions as loose_equals.

    Args:
        left: First value
        right: Second value

    Returns:
        -1, 0 or 1 as left is less than, equal to, or greater than right

    Raises:
        InvalidArgumentError: If the values cannot be ordered
    """
    if left is None and right is None:
        return 0
    if isinstance(left, bool) or isinstance(right, bool):
        return _sign(is_truthy(left) > is_truthy(right), is_truthy(left) < is_truthy(right))
    if left is None and isinstance(right, str):
        return _native_compare("", right)
    if right is None and isinstance(left, str):
        return _native_compare(left, "")
    if left is None or right is None:
        return _sign(is_truthy(left) > is_truthy(right), is_truthy(left) < is_truthy(right))
    if _is_number(left) and _is_number(right):
        return _native_compare(left, right)
    if _is_number(left) and isinstance(right, str):
        return _compare_number_with_string(left, right)
    if isinstance(left, str) and _is_number(right):
        return -_compare_number_with_string(right, left)
    if isinstance(left, str) and isinstance(right, str):
        if is_numeric_string(left) and is_numeric_string(right):
            return _native_compare(_to_number(left), _to_number(right))
        return _native_compare(left, right)
    if _is_array(left) and _is_array(right):
        return _compare_arrays(left, right)
    if _is_array(left):
        return 1
    if _is_array(right):
        return -1
    return _native_compare(left, right)


def _compare_arrays(left: Any, right: Any) -> int:
    left_pairs = to_pairs(left)
    right_values = dict(to_pairs(right))
    if len(left_pairs) != len(right_values):
        return _sign(len(left_pairs) > len(right_values), len(left_pairs) < len(right_values))
    for key, value in left_pairs:
        if key not in right_values:
            raise InvalidArgumentError(
                f"Cannot order sequences with different keys ({key!r} is missing).",
                type(right).__name__,
            )
        result = loose_compare(value, right_values[key])
        if result:
            return result
    return 0
