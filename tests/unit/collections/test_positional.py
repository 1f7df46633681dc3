"""Tests for take, skip and slice_."""

import pytest

from iter_tools import skip, slice_, take


@pytest.mark.unit
class TestTake:
    """Test take."""

    def test_take_prefix(self):
        """Test taking the leading items."""
        assert take([1, 2, 3], 2) == [1, 2]
        assert take({"a": 1, "b": 2, "c": 3}, 2) == {"a": 1, "b": 2}

    @pytest.mark.parametrize("length", [0, -1])
    def test_take_nothing(self, length):
        """Test that zero and negative lengths give an empty list."""
        assert take([1, 2, 3], length) == []

    @pytest.mark.parametrize("length", [3, 10])
    def test_take_overrun_returns_same_object(self, length):
        """Test that taking everything returns the input itself."""
        data = [1, 2, 3]
        assert take(data, length) is data

    def test_take_none_and_iterator(self):
        """Test take over None and a one-shot iterator."""
        assert take(None, 2) == []
        assert take(iter([1, 2]), 5) == [1, 2]


@pytest.mark.unit
class TestSkip:
    """Test skip."""

    def test_skip_keeps_keys(self):
        """Test that the remainder keeps its original keys."""
        assert skip([1, 2, 3], 1) == {1: 2, 2: 3}
        assert skip({"a": 1, "b": 2}, 1) == {"b": 2}

    def test_skip_zero_returns_same_object(self):
        """Test that skipping nothing returns the input itself."""
        data = [1, 2, 3]
        assert skip(data, 0) is data
        assert skip(data, -2) is data

    def test_skip_overrun_is_new_empty_list(self):
        """Test that skipping everything builds an empty list."""
        data = [1, 2, 3]
        result = skip(data, 10)
        assert result == []
        assert result is not data

    def test_take_and_skip_overrun_differ_in_identity(self):
        """Test that take overrun keeps the object while skip overrun does not."""
        data = [1, 2]
        assert take(data, 5) is data
        assert skip(data, 5) is not data


@pytest.mark.unit
class TestSlice:
    """Test slice_."""

    def test_slice_is_take_of_skip(self):
        """Test the slice identity."""
        data = [1, 2, 3, 4, 5]
        assert slice_(data, 1, 2) == take(skip(data, 1), 2) == {1: 2, 2: 3}

    def test_slice_without_length(self):
        """Test slicing to the end."""
        assert slice_([1, 2, 3, 4, 5], 2) == {2: 3, 3: 4, 4: 5}

    def test_slice_from_start_keeps_list(self):
        """Test that a leading slice is still a list."""
        assert slice_([1, 2, 3], 0, 2) == [1, 2]

    def test_slice_generator(self):
        """Test that a generator is only consumed once."""
        assert slice_((x for x in range(5)), 1, 2) == {1: 1, 2: 2}

    def test_slice_none(self):
        """Test slicing the empty sequence."""
        assert slice_(None, 1) == []
