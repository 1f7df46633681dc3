"""Tests for get and has."""

import pytest

from iter_tools import get, has


@pytest.mark.unit
class TestGet:
    """Test get."""

    def test_get_defaults(self):
        """Test plain and callable defaults on a miss."""
        assert get({}, "x", 4) == 4
        assert get({}, "x", lambda: 10) == 10
        assert get({"a": 1}, "a", 99) == 1

    def test_get_falsy_value_is_a_hit(self):
        """Test that a present key wins even when its value is empty."""
        assert get({"a": 0}, "a", 5) == 0
        assert get({"a": None}, "a", 5) is None

    @pytest.mark.parametrize("container", [None, 0, "", [], {}])
    def test_get_empty_container(self, container):
        """Test that empty containers give the default."""
        assert get(container, "a", "fallback") == "fallback"

    def test_get_list_index_is_strict(self):
        """Test that list positions are matched by strict key equality."""
        assert get([10, 20], 1) == 20
        assert get([10, 20], "1") is None

    def test_default_is_lazy(self):
        """Test that a callable default is not invoked on a hit."""

        def explode():
            raise AssertionError("default evaluated")

        assert get({"a": 1}, "a", explode) == 1

    def test_get_record_attribute(self, people):
        """Test reading records by attribute."""
        ann = people[0]
        assert get(ann, "name") == "ann"
        assert get(ann, "missing", "d") == "d"
        assert get(ann, 0, "d") == "d"
        assert get(people[2], "age", 1) is None


@pytest.mark.unit
class TestHas:
    """Test has."""

    def test_has_all_keys(self, ages):
        """Test that every requested key must be present."""
        assert has(ages, ["joe", "jim"])
        assert not has(ages, ["joe", "jack"])

    def test_has_single_key(self, ages):
        """Test a single scalar key."""
        assert has(ages, "joe")
        assert not has(ages, "jo")

    def test_has_mapping_contributes_keys(self, ages):
        """Test that a mapping of keys is checked by its keys."""
        assert has(ages, {"joe": None, "john": None})

    def test_has_no_keys(self, ages):
        """Test that an empty key list is vacuously present."""
        assert has(ages, [])
        assert has(None, [])

    def test_has_strict_keys(self):
        """Test that positions are not matched by numeric strings."""
        assert has([1, 2], 1)
        assert not has([1, 2], "1")
        assert not has(None, "a")
