from datetime import datetime, timedelta, timezone

import pytest

from elspot.tz.wall_clock import WallClock, decode_reading
from elspot.utils.errors import ZERO_INSTANT, MalformedReading


def test_decode_reading_reads_fields_with_zero_offset():
    assert decode_reading("1325379600") == WallClock(2012, 1, 1, 1, 0, 0)
    assert decode_reading("1445742000") == WallClock(2015, 10, 25, 3, 0, 0)


def test_decode_reading_epoch_and_whitespace():
    assert decode_reading("0") == WallClock(1970, 1, 1)
    assert decode_reading("  1459044000\n") == WallClock(2016, 3, 27, 2, 0, 0)


def test_decode_reading_leap_day():
    # 2016-02-29 12:34:56
    assert decode_reading("1456749296") == WallClock(2016, 2, 29, 12, 34, 56)


@pytest.mark.parametrize(
    "raw",
    ["invalid input", "", "   ", "-1", "+5", "1.5", "1e9", "12 34", "０１", "١٢٣"],
)
def test_decode_reading_rejects_non_integers(raw):
    with pytest.raises(MalformedReading) as exc:
        decode_reading(raw)

    assert exc.value.raw == raw
    assert exc.value.instant == ZERO_INSTANT


def test_decode_reading_rejects_out_of_calendar_range():
    with pytest.raises(MalformedReading):
        decode_reading("9" * 20)


def test_decode_reading_rejects_non_string():
    with pytest.raises(MalformedReading):
        decode_reading(1325379600)


def test_wall_clock_validates_ranges():
    with pytest.raises(ValueError):
        WallClock(2015, 2, 29)
    with pytest.raises(ValueError):
        WallClock(2015, 13, 1)
    with pytest.raises(ValueError):
        WallClock(2015, 1, 1, 24)


def test_wall_clock_from_datetime_ignores_tzinfo():
    aware = datetime(2015, 10, 25, 3, 0, 0, 500, tzinfo=timezone(timedelta(hours=5)))
    assert WallClock.from_datetime(aware) == WallClock(2015, 10, 25, 3)


def test_wall_clock_shifted():
    assert WallClock(2016, 3, 27, 3, 30).shifted(timedelta(hours=1)) == WallClock(2016, 3, 27, 4, 30)
    assert WallClock(2015, 12, 31, 23).shifted(timedelta(hours=1)) == WallClock(2016, 1, 1, 0)
