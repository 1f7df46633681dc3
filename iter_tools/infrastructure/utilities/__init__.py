"""Infrastructure utilities - collection and file utilities."""

from iter_tools.infrastructure.utilities.file import read_json_file, read_yaml_file

__all__ = [
    # File utilities
    "read_json_file",
    "read_yaml_file",
]
