# elspot/tz/resolver.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from elspot.engines.base import BaseEngine
from elspot.tz.wall_clock import WallClock, decode_reading
from elspot.tz.zone_rule import CivilStatus, ZoneRule


@dataclass
class ResolverState:
    """
    Running memory of one reading stream.

    Both fields are None until the first successful resolution.
    """

    last_instant: Optional[datetime] = None
    last_offset: Optional[timedelta] = None


def _at_offset(wall: WallClock, offset: timedelta) -> datetime:
    return (wall.to_datetime() - offset).replace(tzinfo=timezone.utc)


class DstResolver(BaseEngine[str, datetime]):
    """
    Recovers true instants from disguised local wall-clock readings.

    Decision per wall clock (see ZoneRule.classify):

      STANDARD / DAYLIGHT  -> that offset, state is not consulted
      NONEXISTENT          -> moved forward by the daylight delta, daylight offset
      AMBIGUOUS            -> daylight offset if it moves past the last output
                              (first occurrence), otherwise standard offset
                              (second occurrence, one delta later)

    One resolver per stream. Feeding two unrelated streams through the same
    instance corrupts the AMBIGUOUS decision. The rule itself can be shared.

    Usage:
        resolver = DstResolver(EURule(timedelta(hours=2), timedelta(hours=3)))
        resolver.parse_broken_time("1445742000")  # 2015-10-25 00:00 UTC
        resolver.parse_broken_time("1445742000")  # 2015-10-25 01:00 UTC
    """

    def __init__(self, rule: ZoneRule, state: Optional[ResolverState] = None):
        self.rule = rule
        self.state = state if state is not None else ResolverState()

    # --------------------------------------------------
    # streaming mode
    # --------------------------------------------------
    def parse_broken_time(self, raw: str) -> datetime:
        """
        Decode + resolve one disguised reading.

        Raises MalformedReading (with .instant == ZERO_INSTANT) before the state
        is touched, so the stream continues correctly on the next valid reading.
        """
        wall = decode_reading(raw)
        return self.resolve(wall)

    def process(self, event: str) -> datetime:
        return self.parse_broken_time(event)

    # --------------------------------------------------
    # state machine
    # --------------------------------------------------
    def resolve(self, wall: WallClock) -> datetime:
        year = self.rule.transitions(wall.year)
        status = year.classify(wall.to_datetime())

        if status is CivilStatus.STANDARD:
            offset = year.standard
        elif status is CivilStatus.DAYLIGHT:
            offset = year.daylight
        elif status is CivilStatus.NONEXISTENT:
            # first wall clock that exists after the gap
            wall = wall.shifted(year.daylight_delta)
            offset = year.daylight
        else:
            offset = self._pick_ambiguous(wall, year.standard, year.daylight)

        instant = _at_offset(wall, offset)
        self.state.last_instant = instant
        self.state.last_offset = offset
        return instant

    def _pick_ambiguous(self, wall: WallClock, standard: timedelta, daylight: timedelta) -> timedelta:
        last = self.state.last_instant
        if last is None or _at_offset(wall, daylight) > last:
            return daylight
        return standard

    def reset(self) -> None:
        self.state = ResolverState()
