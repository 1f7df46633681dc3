"""YAML file operations utilities."""

from typing import Any, Dict

import yaml


def read_yaml_file(file_path: str, encoding: str = "utf-8") -> Dict[str, Any]:
    """
    Read a YAML file and return parsed data.

    Args:
        file_path: File path
        encoding: File encoding

    Returns:
        Parsed YAML data (an empty dictionary for an empty document)

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise FileNotFoundError(f"YAML file not found: {file_path}") from e
