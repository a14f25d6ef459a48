"""Configuration loader for YAML files.

Aircraft profiles, flight loads and flight plans are all YAML documents read
through ``ConfigLoader``.

Typical usage example:
    from flightprep.core.config import ConfigLoader

    plan = ConfigLoader.load("plans/llhz-llib.yaml")
    cruise_ias = plan.get("parameters.cruise_ias", default=90)
"""

from pathlib import Path
from typing import Any

import yaml

from flightprep.core.logging_system import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader({"parameters": {"cruise_gph": 8}})
        >>> config.get("parameters.cruise_gph")
        8
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. "parameters.cruise_ias".
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def get_list(self, key: str) -> list[Any]:
        """Get a list value, an empty list when the key is missing.

        Raises:
            ConfigError: If the key holds something other than a list.
        """
        value = self.get(key, [])
        if value is None:
            return []
        if not isinstance(value, list):
            raise ConfigError(f"Configuration key is not a list: {key}")
        return value

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary."""
        return self._data.copy()
