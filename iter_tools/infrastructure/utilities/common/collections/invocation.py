"""Callback invocation helpers.

Callbacks are invoked with the full argument list, e.g. ``(value, key)``
for predicates or ``(carry, value, key)`` for reducers, trimmed to the
number of positional parameters the callback accepts. ``lambda v: ...``
and ``lambda v, k: ...`` are therefore both valid predicates.
"""

import inspect
from typing import Any, Callable, Optional

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_capacity(callback: Callable[..., Any]) -> Optional[int]:
    """
    Count the positional arguments a callable accepts.

    Args:
        callback: Callable to inspect

    Returns:
        Number of positional parameters, -1 for ``*args``, or None when the
        signature cannot be inspected (some builtins)
    """
    try:
        signature = inspect.signature(callback)
    except (ValueError, TypeError):
        return None

    capacity = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return -1
        if parameter.kind in _POSITIONAL_KINDS:
            capacity += 1
    return capacity


def arity_adapter(callback: Callable[..., Any], fallback: int = 1) -> Callable[..., Any]:
    """
    Wrap a callback so it can always be called with the full argument list.

    Args:
        callback: Callable to wrap
        fallback: Number of leading arguments passed when the signature
            cannot be inspected

    Returns:
        Callable accepting any number of positional arguments
    """
    capacity = positional_capacity(callback)
    if capacity == -1:
        return callback
    if capacity is None:
        capacity = fallback

    def adapted(*args: Any) -> Any:
        return callback(*args[:capacity])

    return adapted
