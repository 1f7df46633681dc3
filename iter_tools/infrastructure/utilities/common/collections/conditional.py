"""Conditional application utility functions.

The callbacks receive the ``SequenceRef`` and may replace ``ref.value``::

    ref = when_empty(SequenceRef([]), lambda ref, condition: setattr(ref, "value", [0]))
    assert ref.value == [0]
"""

from collections.abc import Iterator
from typing import Any, Callable, Optional

from iter_tools.domain.core.common_types import SequenceRef

from .enumeration import pack, to_pairs
from .invocation import arity_adapter
from .validation import is_empty, is_not_empty, is_truthy


def _hold(target: Any) -> SequenceRef:
    """Wrap the target in a ref, materializing one-shot iterators so they can be read twice."""
    ref = SequenceRef.of(target)
    if isinstance(ref.value, Iterator):
        ref.value = pack(to_pairs(ref.value))
    return ref


def when(
    target: Any,
    condition: Any,
    callback: Callable[..., Any],
    default: Optional[Callable[..., Any]] = None,
) -> SequenceRef:
    """
    Apply a callback to a sequence if a condition holds.

    Args:
        target: SequenceRef, or a plain sequence to wrap in a new one; iterators
            are replaced by their items before anything reads them
        condition: Value, or a function of the current sequence
        callback: Function of (ref, condition), called when the condition is truthy
        default: Function of (ref, condition), called otherwise

    Returns:
        The ref, holding whatever sequence the callbacks left in it
    """
    ref = _hold(target)

    if callable(condition):
        condition = arity_adapter(condition)(ref.value)

    if is_truthy(condition):
        arity_adapter(callback)(ref, condition)
    elif default is not None:
        arity_adapter(default)(ref, condition)

    return ref


def when_empty(
    target: Any,
    callback: Callable[..., Any],
    default: Optional[Callable[..., Any]] = None,
) -> SequenceRef:
    """Apply a callback if the sequence is empty."""
    ref = _hold(target)
    return when(ref, is_empty(ref.value), callback, default)


def when_not_empty(
    target: Any,
    callback: Callable[..., Any],
    default: Optional[Callable[..., Any]] = None,
) -> SequenceRef:
    """Apply a callback if the sequence is not empty."""
    ref = _hold(target)
    return when(ref, is_not_empty(ref.value), callback, default)
