"""
Constants module for Today I Ran.

This module defines constants used throughout the Today I Ran application.
"""

# Version information
VERSION = '1.0.0'
VERSION_DATE = '2026-10-18'

# Scale factors relative to the base unit of each dimension
METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = 1609.344
METERS_PER_YARD = 0.9144
METERS_PER_FOOT = 0.3048

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0

# Spellings accepted for each unit of length (lower case)
LENGTH_ALIASES = {
    "m": ["m", "meter", "meters"],
    "km": ["km", "kilometer", "kilometers"],
    "mi": ["mi", "mile", "miles"],
    "yd": ["yd", "yard", "yards"],
    "ft": ["ft", "foot", "feet"],
}

# Display precision
DEFAULT_SECONDS_PRECISION = 0
DEFAULT_LENGTH_PRECISION = 3
DEFAULT_SPEED_PRECISION = 3
DEFAULT_RATIO_PRECISION = 3

# Configuration
CONFIG_DIR = '~/.today_i_ran'
CONFIG_FILE_NAME = 'config.json'
REFERENCE_FILE_NAME = 'reference.yaml'

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
LOG_FORMAT = '%(asctime)-15s %(levelname)s %(message)s'
