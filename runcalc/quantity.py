"""
Quantity module - Typed physical quantities for runs.

This module provides lengths, durations and speeds. Every quantity stores its
magnitude in the base unit of its dimension (meters, seconds, meters per
second) and only converts on the way in and out, so arithmetic never has to
care about units.
"""

import numbers
from collections import namedtuple
from functools import total_ordering

from .constants import (
    METERS_PER_FOOT,
    METERS_PER_KILOMETER,
    METERS_PER_MILE,
    METERS_PER_YARD,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

LENGTH = 'length'
TIME = 'time'
SPEED = 'speed'

# factor is the size of one unit expressed in the base unit of its dimension
Unit = namedtuple('Unit', ['name', 'abbreviation', 'factor', 'dimension'])

METER = Unit('meter', 'm', 1.0, LENGTH)
KILOMETER = Unit('kilometer', 'km', METERS_PER_KILOMETER, LENGTH)
MILE = Unit('mile', 'mi', METERS_PER_MILE, LENGTH)
YARD = Unit('yard', 'yd', METERS_PER_YARD, LENGTH)
FOOT = Unit('foot', 'ft', METERS_PER_FOOT, LENGTH)

SECOND = Unit('second', 's', 1.0, TIME)
MINUTE = Unit('minute', 'min', SECONDS_PER_MINUTE, TIME)
HOUR = Unit('hour', 'h', SECONDS_PER_HOUR, TIME)

METER_PER_SECOND = Unit('meter per second', 'm/s', 1.0, SPEED)
KILOMETER_PER_HOUR = Unit('kilometer per hour', 'km/h',
                          METERS_PER_KILOMETER / SECONDS_PER_HOUR, SPEED)
MILE_PER_HOUR = Unit('mile per hour', 'mph',
                     METERS_PER_MILE / SECONDS_PER_HOUR, SPEED)

LENGTH_UNITS = {u.abbreviation: u for u in (METER, KILOMETER, MILE, YARD, FOOT)}
TIME_UNITS = {u.abbreviation: u for u in (SECOND, MINUTE, HOUR)}
SPEED_UNITS = {u.abbreviation: u for u in (METER_PER_SECOND, KILOMETER_PER_HOUR, MILE_PER_HOUR)}


def _is_number(value):
    return isinstance(value, numbers.Real)


@total_ordering
class Quantity:
    """
    Base class for a magnitude of one physical dimension.

    Subclasses set ``dimension`` and ``base_unit``. Quantities of the same
    class can be added, subtracted, compared and divided into a plain ratio;
    scaling by a number keeps the class.
    """

    __slots__ = ('_magnitude',)

    dimension = None
    base_unit = None

    def __init__(self, value, unit=None):
        """
        Initialize a quantity.

        Args:
            value: Numeric value expressed in ``unit``
            unit: Unit of ``value``; defaults to the base unit

        Raises:
            ValueError: If the unit belongs to another dimension
        """
        unit = self.base_unit if unit is None else unit
        self._check_unit(unit)
        self._magnitude = float(value) * unit.factor

    @classmethod
    def from_base(cls, magnitude):
        """Create a quantity directly from a magnitude in the base unit."""
        quantity = cls.__new__(cls)
        quantity._magnitude = float(magnitude)
        return quantity

    def _check_unit(self, unit):
        if unit.dimension != self.dimension:
            raise ValueError(f"Unit '{unit.abbreviation}' is not a unit of {self.dimension}")

    @property
    def magnitude(self):
        """Magnitude in the base unit."""
        return self._magnitude

    def get(self, unit):
        """
        Get the value of this quantity expressed in another unit.

        Args:
            unit: Target unit, must share this quantity's dimension

        Returns:
            The converted value as a float
        """
        self._check_unit(unit)
        return self._magnitude / unit.factor

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.from_base(self._magnitude + other._magnitude)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.from_base(self._magnitude - other._magnitude)

    def __mul__(self, factor):
        if not _is_number(factor):
            return NotImplemented
        return self.from_base(self._magnitude * factor)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if _is_number(other):
            return self.from_base(self._magnitude / other)
        if type(other) is type(self):
            return self._magnitude / other._magnitude
        return NotImplemented

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._magnitude == other._magnitude

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._magnitude < other._magnitude

    def __hash__(self):
        return hash((self.dimension, self._magnitude))

    def __bool__(self):
        return self._magnitude != 0.0

    def __repr__(self):
        return f"{type(self).__name__}({self._magnitude!r} {self.base_unit.abbreviation})"


class Duration(Quantity):
    """A span of time, stored in seconds."""

    __slots__ = ()

    dimension = TIME
    base_unit = SECOND

    @classmethod
    def from_hms(cls, hours=0.0, minutes=0.0, seconds=0.0):
        """Build a duration from hour, minute and second components."""
        return cls(hours, HOUR) + cls(minutes, MINUTE) + cls(seconds, SECOND)


class Speed(Quantity):
    """A velocity, stored in meters per second."""

    __slots__ = ()

    dimension = SPEED
    base_unit = METER_PER_SECOND


class Length(Quantity):
    """A distance, stored in meters."""

    __slots__ = ()

    dimension = LENGTH
    base_unit = METER

    def __truediv__(self, other):
        # length / time is a speed, length / speed is the time it takes
        if isinstance(other, Duration):
            return Speed.from_base(self._magnitude / other.magnitude)
        if isinstance(other, Speed):
            return Duration.from_base(self._magnitude / other.magnitude)
        return super().__truediv__(other)
