"""
Human-readable rendering of quantities.
"""

from .constants import (
    DEFAULT_LENGTH_PRECISION,
    DEFAULT_RATIO_PRECISION,
    DEFAULT_SECONDS_PRECISION,
    DEFAULT_SPEED_PRECISION,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def split_duration(duration, precision=DEFAULT_SECONDS_PRECISION):
    """
    Split a duration into whole hours, whole minutes and remaining seconds.

    The total is rounded to ``precision`` decimals first, so that e.g.
    59.9996 s never shows up as "60.000 s".

    Args:
        duration: The Duration to split
        precision: Number of decimals kept for the seconds

    Returns:
        Tuple of (hours, minutes, seconds)
    """
    total = round(duration.magnitude, precision)
    hours = int(total // SECONDS_PER_HOUR)
    total -= hours * SECONDS_PER_HOUR
    minutes = int(total // SECONDS_PER_MINUTE)
    seconds = total - minutes * SECONDS_PER_MINUTE
    return hours, minutes, seconds


def format_duration(duration, precision=DEFAULT_SECONDS_PRECISION):
    """
    Format a duration as "1 h 5 min 30 s", "25 min 0 s" or "45 s".

    Hours and minutes are left out while they are zero, but once a larger
    component is shown every smaller one is shown too.

    Args:
        duration: The Duration to format
        precision: Number of decimals shown for the seconds

    Returns:
        The formatted string
    """
    hours, minutes, seconds = split_duration(duration, precision)
    s = f"{seconds:.{precision}f}"

    if hours > 0:
        return f"{hours} h {minutes} min {s} s"
    if minutes > 0:
        return f"{minutes} min {s} s"
    return f"{s} s"


def format_length(length, unit, precision=DEFAULT_LENGTH_PRECISION):
    """Format a length in the given unit, e.g. "10.000 km"."""
    return f"{length.get(unit):.{precision}f} {unit.abbreviation}"


def format_speed(speed, unit, precision=DEFAULT_SPEED_PRECISION):
    """Format a speed in the given unit, e.g. "12.000 km/h"."""
    return f"{speed.get(unit):.{precision}f} {unit.abbreviation}"


def format_ratio(ratio, precision=DEFAULT_RATIO_PRECISION):
    """Format a dimensionless ratio, e.g. "0.623 times"."""
    return f"{ratio:.{precision}f} times"
