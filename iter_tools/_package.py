"""Package metadata and naming constants."""

from ._version import __version__

PACKAGE_NAME = "iter-tools"
PACKAGE_NAME_SHORT = "iter_tools"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Collection helpers that treat lists, mappings and iterables as ordered key/value sequences"
