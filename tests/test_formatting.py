import pytest

from runcalc.formatting import (
    format_duration,
    format_length,
    format_ratio,
    format_speed,
    split_duration,
)
from runcalc.quantity import (
    FOOT,
    KILOMETER,
    KILOMETER_PER_HOUR,
    METER,
    MILE,
    MILE_PER_HOUR,
    SECOND,
    Duration,
    Length,
    Speed,
)


@pytest.mark.parametrize('seconds, text', [
    (0, '0 s'),
    (45, '45 s'),
    (1500, '25 min 0 s'),
    (3600, '1 h 0 min 0 s'),
    (3630, '1 h 0 min 30 s'),
    (3930, '1 h 5 min 30 s'),
    (9000, '2 h 30 min 0 s'),
    (59.6, '1 min 0 s'),
])
def test_format_duration(seconds, text):
    assert format_duration(Duration(seconds, SECOND)) == text


def test_format_duration_with_decimals():
    assert format_duration(Duration(61.1234, SECOND), precision=3) == '1 min 1.123 s'
    assert format_duration(Duration(3599.9996, SECOND), precision=3) == '1 h 0 min 0.000 s'
    assert format_duration(Duration(0, SECOND), precision=3) == '0.000 s'


def test_split_duration():
    assert split_duration(Duration(3930, SECOND)) == (1, 5, 30)


def test_format_length():
    assert format_length(Length(10, KILOMETER), KILOMETER) == '10.000 km'
    assert format_length(Length(1, MILE), METER) == '1609.344 m'
    assert format_length(Length(1, METER), FOOT, precision=1) == '3.3 ft'


def test_format_speed():
    assert format_speed(Speed(12, KILOMETER_PER_HOUR), KILOMETER_PER_HOUR) == '12.000 km/h'
    assert format_speed(Speed(1.609344, KILOMETER_PER_HOUR), MILE_PER_HOUR) == '1.000 mph'


def test_format_ratio():
    assert format_ratio(0.62345) == '0.623 times'
