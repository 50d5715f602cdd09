"""
Configuration module for reference evapotranspiration calculations.

Loads configuration from an optional JSON file and environment variables.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from . import constants
from .date_utils import DateUtils

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "file": None,
    },
    "calendar": {
        "timezone": "UTC",
    },
    "hargreaves_samani": {
        "coefficient": constants.HARGREAVES_COEFFICIENT,
    },
}


class Config:
    """Configuration manager for the calculators."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses the
                        REFERENCE_ET_CONFIG env var; built-in defaults apply
                        when neither is set
        """
        self.config_file = config_file or os.getenv("REFERENCE_ET_CONFIG")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Merge configuration from JSON file over the defaults."""
        if not self.config_file:
            return

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("REFERENCE_ET_LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("REFERENCE_ET_LOG_LEVEL")

        if os.getenv("REFERENCE_ET_LOG_FILE"):
            self.config["logging"]["file"] = os.getenv("REFERENCE_ET_LOG_FILE")

        if os.getenv("REFERENCE_ET_TIMEZONE"):
            self.config["calendar"]["timezone"] = os.getenv("REFERENCE_ET_TIMEZONE")

        if os.getenv("REFERENCE_ET_HS_COEFFICIENT"):
            value = os.getenv("REFERENCE_ET_HS_COEFFICIENT")
            try:
                self.config["hargreaves_samani"]["coefficient"] = float(value)
            except ValueError:
                raise ValueError(
                    f"REFERENCE_ET_HS_COEFFICIENT must be a number, got {value!r}"
                )

    def _validate_config(self) -> None:
        """Validate configuration values."""
        errors = []

        level = self.get("logging.level")
        if not isinstance(level, str) or not isinstance(
            logging.getLevelName(level.upper()), int
        ):
            errors.append(f"logging.level is not a valid level: {level!r}")

        coefficient = self.get("hargreaves_samani.coefficient")
        if not isinstance(coefficient, (int, float)) or coefficient <= 0:
            errors.append(
                f"hargreaves_samani.coefficient must be a positive number, got {coefficient!r}"
            )

        try:
            DateUtils.parse_timezone(self.get("calendar.timezone"))
        except ValueError as e:
            errors.append(f"calendar.timezone: {e}")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'calendar.timezone')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO").upper()

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path, if file logging is enabled."""
        return self.get("logging.file")

    @property
    def timezone(self) -> str:
        """Get station timezone used to resolve aware datetimes."""
        return self.get("calendar.timezone", "UTC")

    @property
    def hargreaves_coefficient(self) -> float:
        """Get default Hargreaves-Samani coefficient C0."""
        return float(
            self.get("hargreaves_samani.coefficient", constants.HARGREAVES_COEFFICIENT)
        )

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, timezone={self.timezone})"
