"""Record querying utility functions."""

from typing import Any, Callable, Dict, List

from iter_tools.domain.core.comparison import ComparisonOperator
from iter_tools.infrastructure.logging.logger import get_logger

from .enumeration import to_pairs
from .equality import loose_compare, loose_equals, strict_equals
from .lookup import get
from .validation import is_falsy, is_truthy

logger = get_logger(__name__)


def _is_member(retrieved: Any, haystack: Any) -> bool:
    return any(loose_equals(retrieved, member) for _, member in to_pairs(haystack))


_OPERATOR_TESTS: Dict[ComparisonOperator, Callable[[Any, Any], bool]] = {
    ComparisonOperator.LOOSE_EQUALS: loose_equals,
    ComparisonOperator.LOOSE_NOT_EQUALS: lambda retrieved, value: not loose_equals(retrieved, value),
    ComparisonOperator.STRICT_EQUALS: strict_equals,
    ComparisonOperator.STRICT_NOT_EQUALS: lambda retrieved, value: not strict_equals(retrieved, value),
    ComparisonOperator.GREATER_THAN: lambda retrieved, value: loose_compare(retrieved, value) > 0,
    ComparisonOperator.LESS_THAN: lambda retrieved, value: loose_compare(retrieved, value) < 0,
    ComparisonOperator.GREATER_THAN_OR_EQUAL_TO: lambda retrieved, value: loose_compare(retrieved, value) >= 0,
    ComparisonOperator.LESS_THAN_OR_EQUAL_TO: lambda retrieved, value: loose_compare(retrieved, value) <= 0,
    ComparisonOperator.IN: _is_member,
    ComparisonOperator.NOT_IN: lambda retrieved, value: not _is_member(retrieved, value),
}


def operator_test(operator: ComparisonOperator, strict: bool = False) -> Callable[[Any, Any], bool]:
    """
    Get the test function for a comparison operator.

    Args:
        operator: Comparison operator
        strict: Equality used by ``=``

    Returns:
        Function of (retrieved, value) returning a bool
    """
    if operator is ComparisonOperator.EQUALS:
        return strict_equals if strict else loose_equals
    return _OPERATOR_TESTS[operator]


def where(
    collection: Any,
    field: Any,
    operator_or_value: Any = None,
    value: Any = None,
    strict: bool = False,
) -> List[Any]:
    """
    Filter a collection of records by a field.

    There are 3 distinct modes, chosen by which optional arguments are
    empty (None, 0, "", False and empty collections all count as empty):

    1) ``where(records, "id")`` keeps records whose field is truthy.
    2) ``where(records, "id", 5)`` keeps records whose field equals 5
       (loosely, or strictly when ``strict`` is set).
    3) ``where(records, "id", ">", 1)`` compares the field using the operator.

    Unlike ``filter_``, the result is re-keyed from 0.

    Args:
        collection: Collection of records (mappings or objects), or None
        field: Key or attribute name read with ``get``
        operator_or_value: Comparison value (mode 2) or operator token (mode 3)
        value: Comparison value for mode 3
        strict: Use strict equality for mode 2 and the ``=`` operator

    Returns:
        List of matching records

    Raises:
        UnrecognizedComparisonOperatorError: If the mode 3 operator is unknown
    """
    if is_falsy(operator_or_value) and is_falsy(value):
        logger.debug("where filtering by truthiness", field=field)
        return [record for _, record in to_pairs(collection) if is_truthy(get(record, field))]

    if is_falsy(value):
        logger.debug("where filtering by equality", field=field, strict=strict)
        equals = strict_equals if strict else loose_equals
        return [
            record for _, record in to_pairs(collection)
            if equals(get(record, field), operator_or_value)
        ]

    operator = ComparisonOperator.parse(operator_or_value)
    logger.debug("where filtering by operator", field=field, operator=operator.value, strict=strict)
    test = operator_test(operator, strict)
    return [record for _, record in to_pairs(collection) if test(get(record, field), value)]


def where_strict(collection: Any, field: Any, operator_or_value: Any = None, value: Any = None) -> List[Any]:
    """
    Filter a collection of records by a field using strict equality.

    Same as ``where`` with ``strict=True``; an explicit operator still wins.
    """
    return where(collection, field, operator_or_value, value, strict=True)
