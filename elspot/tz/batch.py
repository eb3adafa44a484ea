# elspot/tz/batch.py
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Protocol

from elspot.tz.resolver import DstResolver
from elspot.tz.wall_clock import WallClock
from elspot.tz.zone_rule import ZoneRule


class TimeSeries(Protocol):
    """
    TimeSeries contract

    Any indexable container of records with a read/write instant field.
    The records themselves are never copied or rebuilt.
    """

    def __len__(self) -> int:
        ...

    def time(self, i: int) -> datetime:
        ...

    def set_time(self, i: int, t: datetime) -> None:
        ...


def fix_dst(series: TimeSeries, rule: ZoneRule) -> None:
    """
    Re-resolve every naive time in series, in index order, in place.

    series.time(i) is read for its wall-clock fields only (any tzinfo is
    ignored). A single resolver covers the whole pass, so a repeated autumn
    hour resolves to the daylight offset first and the standard offset second.
    """
    resolver = DstResolver(rule)
    for i in range(len(series)):
        wall = WallClock.from_datetime(series.time(i))
        series.set_time(i, resolver.resolve(wall))


class RecordList:
    """TimeSeries view over a list of objects carrying an instant attribute."""

    def __init__(self, records: List[Any], attr: str = "ts"):
        self.records = records
        self.attr = attr

    def __len__(self) -> int:
        return len(self.records)

    def time(self, i: int) -> datetime:
        return getattr(self.records[i], self.attr)

    def set_time(self, i: int, t: datetime) -> None:
        setattr(self.records[i], self.attr, t)
