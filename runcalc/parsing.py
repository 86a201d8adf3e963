"""
Parsing of free-text distances and durations.

This module turns strings such as "10km", "5.2 mi", "1h 5min 30s" or "45s"
into typed quantities.
"""

import enum
import logging
import re

from .constants import LENGTH_ALIASES
from .quantity import LENGTH_UNITS, Duration, Length

NUMBER = r'\d+(?:\.\d*)?'

DISTANCE_PATTERN = re.compile(r'^\s*(?P<value>' + NUMBER + r')\s*(?P<unit>[A-Za-z]*)\s*$')

# Component values are anything but whitespace and letters, checked against
# NUMBER_PATTERN afterwards.
DURATION_PATTERN = re.compile(
    r'^\s*'
    r'(?:(?P<hours>[^\sa-z]+?)\s*h(?![a-z]))?\s*'
    r'(?:(?P<minutes>[^\sa-z]+?)\s*min(?![a-z]))?\s*'
    r'(?:(?P<seconds>[^\sa-z]+?)\s*(?:sec|s)(?![a-z]))?\s*$',
    re.IGNORECASE,
)

NUMBER_PATTERN = re.compile(r'^' + NUMBER + r'$')

_UNIT_BY_ALIAS = {
    alias: LENGTH_UNITS[abbreviation]
    for abbreviation, aliases in LENGTH_ALIASES.items()
    for alias in aliases
}


class ParseErrorKind(enum.Enum):
    """Reasons why a distance or a time could not be parsed."""

    NO_MATCH = 'no match'
    BAD_UNIT = 'bad unit'
    BAD_NUMBER = 'bad number'
    EMPTY = 'empty'


class ParseError(ValueError):
    """
    Raised when a distance or a time cannot be parsed.

    Attributes:
        kind: ParseErrorKind describing the failure
        text: The text that could not be parsed
    """

    def __init__(self, kind, text, message):
        super().__init__(message)
        self.kind = kind
        self.text = text


def resolve_length_unit(token):
    """
    Resolve a unit token such as "km" or "Miles" to a unit of length.

    Args:
        token: The unit token, matched case-insensitively

    Returns:
        The matching Unit, or None if the token is unknown
    """
    return _UNIT_BY_ALIAS.get(token.lower())


def parse_distance(text, default_unit=None):
    """
    Parse a distance such as "10km", "5.2 mi" or "800 m".

    A bare numeral without a unit is rejected unless ``default_unit`` is given.

    Args:
        text: The distance string
        default_unit: Unit of length used when the string carries no unit

    Returns:
        The parsed Length

    Raises:
        ParseError: NO_MATCH if the string is not a number followed by a
            unit, BAD_UNIT if the unit is unknown or missing
    """
    m = DISTANCE_PATTERN.match(text)
    if not m:
        raise ParseError(ParseErrorKind.NO_MATCH, text, f'Could not parse distance "{text}".')

    value = float(m.group('value'))
    token = m.group('unit')

    if not token:
        if default_unit is None:
            raise ParseError(ParseErrorKind.BAD_UNIT, text,
                             f'No unit given for distance "{text}".')
        unit = default_unit
    else:
        unit = resolve_length_unit(token)
        if unit is None:
            raise ParseError(ParseErrorKind.BAD_UNIT, text, f'Unknown unit "{token.lower()}".')

    distance = Length(value, unit)
    logging.debug(f'Parsed distance "{text}" as {distance.magnitude} m')
    return distance


def _component_value(text, name, value):
    if value is None:
        return 0.0
    if not NUMBER_PATTERN.match(value):
        raise ParseError(ParseErrorKind.BAD_NUMBER, text,
                         f'Could not parse {name} value "{value}" as number.')
    return float(value)


def parse_duration(text):
    """
    Parse a duration such as "25min", "1h 5min 30s" or "45s".

    Hours end in "h", minutes in "min" and seconds in "s" or "sec". Any
    combination may be given, in that order, with or without whitespace, and
    each value may carry a fractional part.

    Args:
        text: The time string

    Returns:
        The parsed Duration

    Raises:
        ParseError: NO_MATCH if the string is not made of such components,
            EMPTY if no component is present, BAD_NUMBER if a component
            value is not a decimal number
    """
    m = DURATION_PATTERN.match(text)
    if not m:
        raise ParseError(ParseErrorKind.NO_MATCH, text, f'Could not parse time "{text}".')

    if not any(m.group(g) is not None for g in ('hours', 'minutes', 'seconds')):
        raise ParseError(ParseErrorKind.EMPTY, text,
                         'No hours, no minutes, and no seconds given.')

    hours = _component_value(text, 'hours', m.group('hours'))
    minutes = _component_value(text, 'minutes', m.group('minutes'))
    seconds = _component_value(text, 'seconds', m.group('seconds'))

    duration = Duration.from_hms(hours, minutes, seconds)
    logging.debug(f'Parsed time "{text}" as {duration.magnitude} s')
    return duration
