"""
File utilities package.

- JSON operations: read_json_file
- YAML operations: read_yaml_file
"""

from .json_utils import read_json_file
from .yaml_utils import read_yaml_file

__all__: list[str] = [
    "read_json_file",
    "read_yaml_file",
]
