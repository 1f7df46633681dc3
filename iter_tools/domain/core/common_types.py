# iter_tools/domain/core/common_types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Tuple, Union

Key = Union[int, str]
Pair = Tuple[Key, Any]


@dataclass
class SequenceRef:
    """Mutable cell holding a sequence.

    Operations that replace the caller's sequence (pop_from, when, ...)
    receive one of these and store the new sequence in ``value``.
    """
    value: Any = None

    @classmethod
    def of(cls, target: Any) -> SequenceRef:
        """Return ``target`` if it is already a ref, otherwise wrap it."""
        if isinstance(target, cls):
            return target
        return cls(target)
