"""Configuration management for the library."""
from __future__ import annotations
import copy
import os
import threading
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from iter_tools.config.defaults import DEFAULT_CONFIG
from iter_tools.config.schemas import IterToolsConfig, LoggingConfig
from iter_tools.domain.core.exceptions import ConfigurationError


class ConfigurationManager:
    """
    Manages library configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying a configuration file (JSON or YAML)
    - Applying programmatic overrides
    - Configuration validation

    Environment variables are never consulted.
    """

    def __init__(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to a .json, .yaml or .yml configuration file
            overrides: Optional dictionary merged over defaults and file values
        """
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._config: Optional[IterToolsConfig] = None

    @property
    def config(self) -> IterToolsConfig:
        """Lazy load and validate the configuration."""
        if self._config is None:
            with self._lock:
                if self._config is None:
                    self._config = self._load_config()
        return self._config

    def _load_config(self) -> IterToolsConfig:
        """Merge all sources and validate the result."""
        from iter_tools.infrastructure.utilities.common.collections import deep_merge_dicts

        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            config_data = deep_merge_dicts(config_data, self._read_config_file(self._config_file))

        config_data = deep_merge_dicts(config_data, self._overrides)

        try:
            return IterToolsConfig.from_dict(config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}", errors) from e

    def _read_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from file."""
        from iter_tools.infrastructure.utilities.file import read_json_file, read_yaml_file

        extension = os.path.splitext(config_path)[1].lower()
        if extension == ".json":
            reader = read_json_file
        elif extension in (".yaml", ".yml"):
            reader = read_yaml_file
        else:
            raise ConfigurationError(f"Unsupported configuration file type: {config_path}")

        try:
            data = reader(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")
        return data

    def get_config(self) -> IterToolsConfig:
        """Get the validated configuration."""
        return self.config

    def get_logging_config(self) -> LoggingConfig:
        """Get the logging section of the configuration."""
        return self.config.logging

    def update(self, updates: Dict[str, Any]) -> None:
        """
        Merge further overrides and force revalidation on next access.

        Args:
            updates: Configuration dictionary merged over current overrides
        """
        from iter_tools.infrastructure.utilities.common.collections import deep_merge_dicts

        with self._lock:
            self._overrides = deep_merge_dicts(self._overrides, updates)
            self._config = None

    def reload(self) -> None:
        """Drop the cached configuration so sources are read again."""
        with self._lock:
            self._config = None
