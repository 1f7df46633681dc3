"""Version information for iter_tools."""

__version__ = "0.1.0"
