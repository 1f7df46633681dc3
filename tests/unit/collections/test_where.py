"""Tests for where and where_strict."""

import pytest
from structlog.testing import capture_logs

from iter_tools import (
    ComparisonOperator,
    UnrecognizedComparisonOperatorError,
    values,
    where,
    where_strict,
)


def ids(records):
    return [record["id"] for record in records]


@pytest.fixture
def numbered():
    """Records with ids 1, 2 and 3."""
    return [{"id": 1}, {"id": 2}, {"id": 3}]


@pytest.mark.unit
class TestWhereModes:
    """Test mode selection in where."""

    def test_truthiness_mode(self, records):
        """Test keeping records with a truthy field."""
        assert where(records, "id") == [{"id": 1}, {"id": 2}, {"id": 3}]

    def test_equality_mode(self, records):
        """Test comparing the field with a single value."""
        assert where(records, "id", 2) == [{"id": 2}]
        assert where(records, "id", "2") == [{"id": 2}]

    def test_operator_mode_rekeys(self, records):
        """Test that operator results are re-keyed from 0."""
        result = where(records, "id", ">", 1)
        assert result == [{"id": 2}, {"id": 3}]
        assert values(result) == result

    def test_empty_comparison_value_falls_back_to_equality(self, numbered):
        """Test that an empty value selects the equality mode."""
        assert where(numbered, "id", ">", 0) == []
        assert where(numbered, "id", 3, None) == [{"id": 3}]

    def test_unknown_operator(self, records):
        """Test that an unknown token is rejected."""
        with pytest.raises(UnrecognizedComparisonOperatorError) as exc_info:
            where(records, "id", "bogus-token", 1)
        assert exc_info.value.operator == "bogus-token"
        assert "bogus-token" in str(exc_info.value)

    def test_unknown_operator_on_empty_collection(self):
        """Test that the token is parsed before iterating."""
        with pytest.raises(UnrecognizedComparisonOperatorError):
            where([], "id", "~", 1)

    def test_where_none(self):
        """Test querying the empty sequence."""
        assert where(None, "id") == []

    def test_where_mapping_of_records(self):
        """Test that a mapping of records gives a list."""
        keyed = {"a": {"id": 1}, "b": {"id": 5}}
        assert where(keyed, "id", ">=", 5) == [{"id": 5}]

    def test_where_attribute_records(self, people):
        """Test records read by attribute."""
        assert [person.name for person in where(people, "age")] == ["ann", "bob"]
        assert [person.name for person in where(people, "age", "<", 18)] == ["bob", "cy"]

    def test_where_logs_mode(self, numbered):
        """Test that the chosen mode is logged at debug."""
        with capture_logs() as cap_logs:
            where(numbered, "id", ">", 1)

        assert cap_logs == [
            {
                "event": "where filtering by operator",
                "field": "id",
                "operator": ">",
                "strict": False,
                "log_level": "debug",
            }
        ]


@pytest.mark.unit
class TestWhereOperators:
    """Test each comparison operator."""

    @pytest.mark.parametrize(
        "operator,value,expected",
        [
            ("=", "2", [2]),
            ("==", "2", [2]),
            ("!=", 2, [1, 3]),
            ("===", 2, [2]),
            ("===", "2", []),
            ("!==", 2, [1, 3]),
            ("!==", "2", [1, 2, 3]),
            (">", 1, [2, 3]),
            ("<", 3, [1, 2]),
            (">=", "2", [2, 3]),
            ("<=", 2, [1, 2]),
            ("in", [1, "3"], [1, 3]),
            ("not-in", [1, 3], [2]),
        ],
    )
    def test_operator(self, numbered, operator, value, expected):
        """Test the operator table."""
        assert ids(where(numbered, "id", operator, value)) == expected

    def test_operator_enum_member(self, numbered):
        """Test that enum members are accepted as tokens."""
        assert ids(where(numbered, "id", ComparisonOperator.GREATER_THAN, 2)) == [3]


@pytest.mark.unit
class TestWhereStrict:
    """Test strict equality in where."""

    def test_strict_equality_mode(self, numbered):
        """Test that strict mode compares types."""
        assert where_strict(numbered, "id", "2") == []
        assert where_strict(numbered, "id", 2) == [{"id": 2}]
        assert where(numbered, "id", "2", strict=True) == []

    def test_equals_operator_follows_strict_flag(self, numbered):
        """Test that = is strict only under where_strict."""
        assert ids(where(numbered, "id", "=", "2")) == [2]
        assert where_strict(numbered, "id", "=", "2") == []

    def test_explicit_operator_overrides_strict(self, numbered):
        """Test that == stays loose under where_strict."""
        assert ids(where_strict(numbered, "id", "==", "2")) == [2]
        assert ids(where_strict(numbered, "id", "!=", "2")) == [1, 3]
