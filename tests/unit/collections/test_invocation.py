"""Tests for callback arity adaptation."""

import functools

import pytest

from iter_tools.infrastructure.utilities.common.collections.invocation import (
    arity_adapter,
    positional_capacity,
)


class Checker:
    def matches(self, value, key):
        return key == value


@pytest.mark.unit
class TestPositionalCapacity:
    """Test positional_capacity."""

    def test_plain_functions(self):
        """Test counting positional parameters."""
        assert positional_capacity(lambda: None) == 0
        assert positional_capacity(lambda value: None) == 1
        assert positional_capacity(lambda value, key=None: None) == 2

    def test_keyword_only_not_counted(self):
        """Test that keyword-only parameters are ignored."""
        assert positional_capacity(lambda value, *, key=None: None) == 1

    def test_var_positional(self):
        """Test that *args accepts everything."""
        assert positional_capacity(lambda *args: None) == -1

    def test_bound_method_and_partial(self):
        """Test that bound self and partial arguments are excluded."""
        assert positional_capacity(Checker().matches) == 2
        assert positional_capacity(functools.partial(lambda a, b, c: None, 1)) == 2


@pytest.mark.unit
class TestArityAdapter:
    """Test arity_adapter."""

    def test_trims_arguments(self):
        """Test that extra arguments are dropped."""
        adapted = arity_adapter(lambda value: value * 2)
        assert adapted(3, "key", "extra") == 6

    def test_var_positional_gets_everything(self):
        """Test that *args callbacks are not wrapped."""
        adapted = arity_adapter(lambda *args: args)
        assert adapted(1, 2, 3) == (1, 2, 3)

    def test_fallback_for_uninspectable(self):
        """Test the fallback argument count."""
        assert arity_adapter(max, fallback=2)(1, 5, "key") == 5
