"""
Run module - A parsed run and the facts derived from it.

All derived values assume the runner keeps a constant pace.
"""

import logging

from .parsing import parse_distance, parse_duration
from .quantity import Length


class Run:
    """
    Represents one run: the distance covered and the time it took.

    A run is immutable once created.
    """

    __slots__ = ('_distance', '_time')

    def __init__(self, distance, time):
        """
        Initialize a run.

        Args:
            distance: Length that was covered
            time: Duration the run took
        """
        object.__setattr__(self, '_distance', distance)
        object.__setattr__(self, '_time', time)

    @classmethod
    def from_text(cls, distance_text, time_text, default_unit=None):
        """
        Parse a run from the distance and time the user typed.

        Args:
            distance_text: Distance string, e.g. "10km"
            time_text: Time string, e.g. "50min"
            default_unit: Unit of length for a distance given without a unit

        Returns:
            A new Run

        Raises:
            ParseError: If either string cannot be parsed
        """
        distance = parse_distance(distance_text, default_unit=default_unit)
        time = parse_duration(time_text)
        return cls(distance, time)

    @property
    def distance(self):
        return self._distance

    @property
    def time(self):
        return self._time

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Run, (self._distance, self._time))

    def __eq__(self, other):
        if not isinstance(other, Run):
            return NotImplemented
        return self._distance == other._distance and self._time == other._time

    def __hash__(self):
        return hash((self._distance, self._time))

    def __repr__(self):
        return f"Run(distance={self._distance!r}, time={self._time!r})"


def parse_run(distance_text, time_text, default_unit=None):
    """Parse a run from text. See Run.from_text."""
    return Run.from_text(distance_text, time_text, default_unit=default_unit)


def average_speed(run):
    """
    Get the average speed of a run.

    Raises:
        ZeroDivisionError: If the run took no time
    """
    if not run.time:
        raise ZeroDivisionError("Cannot compute a speed for a run that took no time.")
    return run.distance / run.time


def average_pace(run, unit):
    """
    Get the time the run needed on average for one unit of length.

    Args:
        run: The run
        unit: Unit of length the pace refers to, e.g. KILOMETER

    Returns:
        Duration per ``unit``

    Raises:
        ZeroDivisionError: If the run covered no distance
    """
    return projected_time(run, Length(1, unit))


def projected_time(run, other_distance):
    """
    Get the time the runner would need for another distance at the same pace.

    Args:
        run: The run
        other_distance: Length to project the run onto

    Returns:
        The projected Duration

    Raises:
        ZeroDivisionError: If the run covered no distance
    """
    if not run.distance:
        raise ZeroDivisionError("Cannot project times from a run that covered no distance.")
    projected = other_distance / run.distance * run.time
    logging.debug(f"Projected {other_distance!r} to {projected!r}")
    return projected


def speed_ratio(speed, reference):
    """Get how many times faster ``speed`` is than ``reference``."""
    return speed / reference
