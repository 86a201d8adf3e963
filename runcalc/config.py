"""
Configuration module for Today I Ran.

This module provides centralized access to the user's default settings.
Command line flags always take precedence over these values.
"""

import os
import json
import logging

from .constants import (
    CONFIG_DIR,
    CONFIG_FILE_NAME,
    DEFAULT_LENGTH_PRECISION,
    DEFAULT_SECONDS_PRECISION,
)
from .quantity import LENGTH_UNITS


class Config:
    """Configuration manager for Today I Ran."""

    # Default values
    _defaults = {
        'use_miles': False,
        'verbose': False,
        'precision': DEFAULT_SECONDS_PRECISION,
        'length_precision': DEFAULT_LENGTH_PRECISION,
        'default_distance_unit': None,
        'reference_file': None,
        'color': True,
        'log_level': 'WARNING',
    }

    # Singleton instance
    _instance = None

    @classmethod
    def get_instance(cls):
        """Get the singleton instance of Config."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Forget the singleton instance so the file is read again."""
        cls._instance = None

    def __init__(self, config_file=None):
        """
        Initialize with default configuration.

        Args:
            config_file: Path of the JSON configuration file (optional)
        """
        self._config_file = config_file or self._get_config_file_path()
        self._config = self._defaults.copy()
        self._load_config()

    def _load_config(self):
        """Load configuration from file if it exists."""
        config_file = self._config_file

        if os.path.exists(config_file):
            try:
                with open(config_file, 'r') as f:
                    loaded_config = json.load(f)
                if not isinstance(loaded_config, dict):
                    raise ValueError("configuration must be a JSON object")
                self._config.update(loaded_config)
                logging.debug(f"Loaded configuration from {config_file}")
            except (OSError, ValueError) as e:
                logging.warning(f"Error loading configuration file {config_file}: {e}")

    def _get_config_file_path(self):
        """Get the path to the configuration file."""
        config_dir = os.path.expanduser(CONFIG_DIR)
        return os.path.join(config_dir, CONFIG_FILE_NAME)

    def get(self, key, default=None):
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if the key is not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def get_precision(self):
        """Get the number of decimals shown for seconds."""
        return self._get_int('precision')

    def get_length_precision(self):
        """Get the number of decimals shown for lengths and speeds."""
        return self._get_int('length_precision')

    def get_default_distance_unit(self):
        """Get the unit used for distances typed without a unit, or None."""
        abbreviation = self._config.get('default_distance_unit')
        if abbreviation is None:
            return None

        unit = LENGTH_UNITS.get(str(abbreviation).lower())
        if unit is None:
            logging.warning(f"Ignoring unknown default distance unit '{abbreviation}'. "
                            f"Must be one of {list(LENGTH_UNITS.keys())}")
        return unit

    def get_reference_file(self):
        """Get the reference data file path, or None for the bundled file."""
        reference_file = self._config.get('reference_file')
        return os.path.expanduser(reference_file) if reference_file else None

    def _get_int(self, key):
        value = self._config.get(key, self._defaults[key])
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        logging.warning(f"Ignoring invalid value for '{key}': {value}")
        return self._defaults[key]


# Global function to get the configuration instance
def get_config():
    """Get the configuration instance."""
    return Config.get_instance()
