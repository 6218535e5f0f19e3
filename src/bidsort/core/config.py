"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config(config_file="bidsort.yaml")

    config.get("paths.csv_path")          # dot-notation access
    config.get("loader.currency_symbol")
    config.get_columns()                  # validated column map
"""

import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "BIDSORT_"
_DEFAULT_CSV_PATH = "eBid_Monthly_Sales.csv"

# Column positions in the eBid monthly sales export
_DEFAULT_COLUMNS = {"title": 0, "bid_id": 1, "amount": 4, "fund": 8}


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    BIDSORT_LOADER__DELIMITER=";" -> config["loader"]["delimiter"] = ";"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge (consumer-specific).
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file:
            if not os.path.exists(self.config_file):
                raise ConfigurationError(f"Config file not found: {self.config_file}")
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        return {
            "paths": {
                "csv_path": _DEFAULT_CSV_PATH,
            },
            "loader": {
                "delimiter": ",",
                "encoding": "utf-8",
                "currency_symbol": "$",
                "columns": dict(_DEFAULT_COLUMNS),
            },
            "logging": {
                "level": "WARNING",
                "file": None,
                "rotation": "10 MB",
                "retention": "7 days",
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    return {}
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not parse config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.csv_path", "loader.delimiter"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_columns(self) -> dict[str, int]:
        """Return the loader column map with positions coerced to ints.

        Raises:
            ConfigurationError: If a field is missing or a position is not a
                non-negative integer.
        """
        raw = self.get("loader.columns", {})
        if not isinstance(raw, dict):
            raise ConfigurationError("loader.columns must be a mapping of field name to column position")

        columns: dict[str, int] = {}
        for field_name in _DEFAULT_COLUMNS:
            if field_name not in raw:
                raise ConfigurationError(f"loader.columns is missing '{field_name}'")
            try:
                position = int(raw[field_name])
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"loader.columns.{field_name} must be an integer, got {raw[field_name]!r}"
                ) from None
            if position < 0:
                raise ConfigurationError(f"loader.columns.{field_name} must not be negative")
            columns[field_name] = position
        return columns
