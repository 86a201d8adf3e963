"""
Reference data module - Race distances and notable performances.

The data lives in a YAML file shipped with the package. A different file
with the same layout can be configured with the ``reference_file`` setting.
"""

import logging
import os
from collections import namedtuple

import yaml

from .constants import REFERENCE_FILE_NAME
from .parsing import ParseError, parse_distance
from .quantity import SPEED_UNITS, Speed

NamedLength = namedtuple('NamedLength', ['name', 'distance'])
NamedSpeed = namedtuple('NamedSpeed', ['name', 'speed'])

DEFAULT_REFERENCE_FILE = os.path.join(os.path.dirname(__file__), 'data', REFERENCE_FILE_NAME)


class ReferenceDataError(ValueError):
    """Raised when a reference data file is malformed."""


class ReferenceData:
    """
    Static reference data used for the comparison tables.

    Attributes:
        metric_distances: Tuple of NamedLength used with metric output
        imperial_distances: Tuple of NamedLength used with imperial output
        speeds: Tuple of NamedSpeed
    """

    def __init__(self, metric_distances, imperial_distances, speeds):
        self.metric_distances = tuple(metric_distances)
        self.imperial_distances = tuple(imperial_distances)
        self.speeds = tuple(speeds)

    def distances(self, use_miles=False):
        """Get the race distances for the selected unit system."""
        return self.imperial_distances if use_miles else self.metric_distances


def _get_or_throw(d, key, error):
    try:
        return d[key]
    except (KeyError, TypeError):
        raise ReferenceDataError(error)


def _named_length(entry):
    name = _get_or_throw(entry, 'name', f"Distance entry without a name: {entry}")
    text = str(_get_or_throw(entry, 'distance', f"Distance '{name}' has no distance"))
    try:
        return NamedLength(str(name), parse_distance(text))
    except ParseError as e:
        raise ReferenceDataError(f"Invalid distance for '{name}': {e}") from e


def _named_speed(entry):
    name = _get_or_throw(entry, 'name', f"Speed entry without a name: {entry}")
    value = _get_or_throw(entry, 'value', f"Speed '{name}' has no value")
    abbreviation = _get_or_throw(entry, 'unit', f"Speed '{name}' has no unit")

    unit = SPEED_UNITS.get(abbreviation)
    if unit is None:
        raise ReferenceDataError(f"Unknown speed unit '{abbreviation}' for '{name}'. "
                                 f"Must be one of {list(SPEED_UNITS.keys())}")
    if not isinstance(value, (int, float)):
        raise ReferenceDataError(f"Speed value for '{name}' is not a number: {value}")

    return NamedSpeed(str(name), Speed(value, unit))


def parse_reference(data):
    """
    Build reference data from the mapping loaded from YAML.

    Args:
        data: Dictionary with 'distances' (with 'metric' and 'imperial' lists)
            and 'speeds' lists

    Returns:
        ReferenceData

    Raises:
        ReferenceDataError: If a section or entry is missing or invalid
    """
    if not isinstance(data, dict):
        raise ReferenceDataError("Reference data must be a mapping")

    distances = _get_or_throw(data, 'distances', "Reference data has no 'distances' section")
    metric = _get_or_throw(distances, 'metric', "Reference data has no metric distances")
    imperial = _get_or_throw(distances, 'imperial', "Reference data has no imperial distances")
    speeds = _get_or_throw(data, 'speeds', "Reference data has no 'speeds' section")

    return ReferenceData(
        [_named_length(entry) for entry in metric or []],
        [_named_length(entry) for entry in imperial or []],
        [_named_speed(entry) for entry in speeds or []],
    )


def load_reference(path=None):
    """
    Load reference data from a YAML file.

    Args:
        path: Path to the YAML file; the bundled file is used when None

    Returns:
        ReferenceData

    Raises:
        ReferenceDataError: If the file is not valid YAML or is malformed
        OSError: If the file cannot be read
    """
    path = os.path.expanduser(path) if path else DEFAULT_REFERENCE_FILE

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ReferenceDataError(f"Invalid YAML in {path}: {e}") from e

    reference = parse_reference(data)
    logging.debug(f"Loaded {len(reference.metric_distances)} metric distances, "
                  f"{len(reference.imperial_distances)} imperial distances and "
                  f"{len(reference.speeds)} speeds from {path}")
    return reference
