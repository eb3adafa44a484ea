"""DST resolution core: zone rules, naive decoding, per-stream resolver, batch fixing."""

from elspot.tz.wall_clock import WallClock, decode_reading
from elspot.tz.zone_rule import (
    CivilStatus,
    EURule,
    YearTransitions,
    ZoneInfoRule,
    ZoneRule,
    load_zone_rule,
)
from elspot.tz.resolver import DstResolver, ResolverState
from elspot.tz.batch import RecordList, TimeSeries, fix_dst

__all__ = [
    "CivilStatus",
    "DstResolver",
    "EURule",
    "RecordList",
    "ResolverState",
    "TimeSeries",
    "WallClock",
    "YearTransitions",
    "ZoneInfoRule",
    "ZoneRule",
    "decode_reading",
    "fix_dst",
    "load_zone_rule",
]
