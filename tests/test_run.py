import copy
import pickle

import pytest

from runcalc.parsing import ParseError, ParseErrorKind
from runcalc.quantity import (
    HOUR,
    KILOMETER,
    KILOMETER_PER_HOUR,
    METER,
    MILE,
    MILE_PER_HOUR,
    MINUTE,
    SECOND,
    Duration,
    Length,
    Speed,
)
from runcalc.run import Run, average_pace, average_speed, parse_run, projected_time, speed_ratio


@pytest.fixture
def ten_k():
    return Run(Length(10, KILOMETER), Duration(50, MINUTE))


def test_parse_run():
    run = parse_run('10km', '50min')
    assert run.distance == Length(10, KILOMETER)
    assert run.time == Duration(50, MINUTE)
    assert run == Run.from_text('10 km', '50 min')


def test_parse_run_fails_on_either_part():
    with pytest.raises(ParseError) as excinfo:
        parse_run('ten km', '50min')
    assert excinfo.value.kind == ParseErrorKind.NO_MATCH

    with pytest.raises(ParseError) as excinfo:
        parse_run('10km', '')
    assert excinfo.value.kind == ParseErrorKind.EMPTY


def test_parse_run_with_default_unit():
    run = parse_run('5', '25min', default_unit=MILE)
    assert run.distance.get(MILE) == pytest.approx(5)


def test_run_is_immutable(ten_k):
    with pytest.raises(AttributeError):
        ten_k.distance = Length(5, KILOMETER)
    with pytest.raises(AttributeError):
        ten_k.extra = 1


def test_average_speed(ten_k):
    assert average_speed(ten_k).get(KILOMETER_PER_HOUR) == pytest.approx(12.0)
    assert average_speed(ten_k).get(MILE_PER_HOUR) == pytest.approx(7.4564543)


def test_average_speed_marathon():
    run = parse_run('42.195km', '2h 30min')
    assert average_speed(run).get(KILOMETER_PER_HOUR) == pytest.approx(16.878)


def test_average_speed_zero_time():
    run = Run(Length(10, KILOMETER), Duration(0, SECOND))
    with pytest.raises(ZeroDivisionError):
        average_speed(run)


def test_average_pace(ten_k):
    assert average_pace(ten_k, KILOMETER).get(MINUTE) == pytest.approx(5.0)
    assert average_pace(ten_k, MILE).get(SECOND) == pytest.approx(482.8032)


def test_projected_time(ten_k):
    assert projected_time(ten_k, Length(5, KILOMETER)).get(SECOND) == pytest.approx(1500)
    assert projected_time(ten_k, Length(42.195, KILOMETER)).get(HOUR) == pytest.approx(3.51625)
    assert projected_time(ten_k, Length(100, METER)).get(SECOND) == pytest.approx(30)


def test_projected_time_zero_distance():
    run = Run(Length(0, METER), Duration(10, MINUTE))
    with pytest.raises(ZeroDivisionError):
        projected_time(run, Length(5, KILOMETER))


def test_speed_ratio(ten_k):
    reference = Speed(24, KILOMETER_PER_HOUR)
    assert speed_ratio(average_speed(ten_k), reference) == pytest.approx(0.5)


def test_run_can_be_copied_and_pickled(ten_k):
    assert copy.copy(ten_k) == ten_k
    assert copy.deepcopy(ten_k) == ten_k
    restored = pickle.loads(pickle.dumps(ten_k))
    assert restored == ten_k
    assert isinstance(restored.distance, Length)
    with pytest.raises(AttributeError):
        restored.time = Duration(1, SECOND)
