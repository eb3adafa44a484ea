# elspot/tz/wall_clock.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from elspot.utils.errors import MalformedReading

# Reference epoch of the disguised counters, read with zero offset.
EPOCH = datetime(1970, 1, 1)

_MAX_SECONDS = int((datetime.max - EPOCH).total_seconds())


@dataclass(frozen=True)
class WallClock:
    """
    Calendar fields with no offset attached.

    Invalid field combinations (month 13, Feb 30, hour 24 ...) fail at
    construction with ValueError.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        # datetime() does the range validation (proleptic Gregorian)
        self.to_datetime()

    # --------------------------------------------------
    def to_datetime(self) -> datetime:
        """Naive datetime with the same fields."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "WallClock":
        """
        Take dt's own calendar fields. tzinfo, if any, is ignored; sub-second
        precision is dropped.
        """
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    def shifted(self, delta: timedelta) -> "WallClock":
        return WallClock.from_datetime(self.to_datetime() + delta)

    def __str__(self) -> str:
        return self.to_datetime().isoformat(sep=" ")


def decode_reading(raw: str) -> WallClock:
    """
    Disguised elapsed-seconds count -> WallClock.

    "1325379600" -> 2012-01-01 01:00:00

    Accepts surrounding whitespace only; signs, decimal points, exponents and
    counts beyond year 9999 raise MalformedReading.
    """
    if not isinstance(raw, str):
        raise MalformedReading(raw, "expected a string")

    s = raw.strip()
    if not s or not s.isascii() or not s.isdigit():
        raise MalformedReading(raw)

    seconds = int(s)
    if seconds > _MAX_SECONDS:
        raise MalformedReading(raw, "out of calendar range")

    return WallClock.from_datetime(EPOCH + timedelta(seconds=seconds))
