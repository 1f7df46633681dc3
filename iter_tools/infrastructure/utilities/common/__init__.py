"""Common utilities shared across the library."""
