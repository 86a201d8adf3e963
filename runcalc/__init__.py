"""
Today I Ran - derive average speed, pace and projected times from a run.
"""

from .constants import VERSION
from .formatting import format_duration, format_length, format_ratio, format_speed
from .parsing import ParseError, ParseErrorKind, parse_distance, parse_duration
from .quantity import Duration, Length, Speed, Unit
from .run import Run, average_pace, average_speed, parse_run, projected_time, speed_ratio

__version__ = VERSION
