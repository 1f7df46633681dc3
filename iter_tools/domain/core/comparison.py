# iter_tools/domain/core/comparison.py
from enum import Enum
from typing import Any

from iter_tools.domain.core.exceptions import UnrecognizedComparisonOperatorError


class ComparisonOperator(str, Enum):
    """Comparison operators understood by where and where-like operations."""
    EQUALS = "="
    LOOSE_EQUALS = "=="
    LOOSE_NOT_EQUALS = "!="
    STRICT_EQUALS = "==="
    STRICT_NOT_EQUALS = "!=="

    GREATER_THAN = ">"
    LESS_THAN = "<"

    GREATER_THAN_OR_EQUAL_TO = ">="
    LESS_THAN_OR_EQUAL_TO = "<="

    IN = "in"
    NOT_IN = "not-in"

    @classmethod
    def parse(cls, token: Any) -> "ComparisonOperator":
        """
        Resolve a token into a comparison operator.

        Args:
            token: Operator token (e.g. ">=") or an existing member

        Returns:
            The matching ComparisonOperator

        Raises:
            UnrecognizedComparisonOperatorError: If the token is not a known operator
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise UnrecognizedComparisonOperatorError(token)
        try:
            return cls(token)
        except ValueError:
            raise UnrecognizedComparisonOperatorError(token) from None
