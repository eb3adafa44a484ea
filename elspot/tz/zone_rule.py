# elspot/tz/zone_rule.py
from __future__ import annotations

import calendar
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from elspot.tz.wall_clock import WallClock
from elspot.utils.errors import UnsupportedYear, UserInputError


class CivilStatus(str, Enum):
    STANDARD = "unambiguous-standard"
    DAYLIGHT = "unambiguous-daylight"
    AMBIGUOUS = "ambiguous"
    NONEXISTENT = "nonexistent"


@dataclass(frozen=True)
class YearTransitions:
    """
    Transition instants of one year (aware, UTC).

    spring: offset goes standard -> daylight (local clock skips forward)
    autumn: offset goes daylight -> standard (local clock repeats)
    Both None for a year without daylight saving.
    """

    year: int
    standard: timedelta
    daylight: timedelta
    spring: Optional[datetime] = None
    autumn: Optional[datetime] = None

    @property
    def daylight_delta(self) -> timedelta:
        return self.daylight - self.standard

    def classify(self, wall: datetime) -> CivilStatus:
        """
        Civil status of a naive wall-clock value.

        gap     = [spring + std, spring + dst)
        overlap = [autumn + std, autumn + dst)
        """
        if self.spring is None or self.autumn is None:
            return CivilStatus.STANDARD

        spring = self.spring.replace(tzinfo=None)
        autumn = self.autumn.replace(tzinfo=None)

        gap_start, gap_end = spring + self.standard, spring + self.daylight
        overlap_start, overlap_end = autumn + self.standard, autumn + self.daylight

        if gap_start <= wall < gap_end:
            return CivilStatus.NONEXISTENT
        if overlap_start <= wall < overlap_end:
            return CivilStatus.AMBIGUOUS

        if spring < autumn:
            # northern hemisphere: daylight in the middle of the year
            in_daylight = gap_end <= wall < overlap_start
        else:
            # southern hemisphere: daylight at both ends of the year
            in_daylight = wall < overlap_start or wall >= gap_end

        return CivilStatus.DAYLIGHT if in_daylight else CivilStatus.STANDARD


class ZoneRule(ABC):
    """
    Read-only description of a civil zone for a range of years.

    Pure lookup: the per-year cache only memoises _compute() and is safe to
    share between any number of resolvers.
    """

    name: str = "zone"

    def __init__(self, min_year: int, max_year: int):
        if min_year > max_year:
            raise UserInputError(f"min_year {min_year} > max_year {max_year}")
        self.min_year = min_year
        self.max_year = max_year
        self._cache: Dict[int, YearTransitions] = {}

    # --------------------------------------------------
    # offsets
    # --------------------------------------------------
    @property
    @abstractmethod
    def standard_offset(self) -> timedelta:
        ...

    @property
    @abstractmethod
    def daylight_offset(self) -> timedelta:
        ...

    @property
    def daylight_delta(self) -> timedelta:
        return self.daylight_offset - self.standard_offset

    # --------------------------------------------------
    # transitions
    # --------------------------------------------------
    @abstractmethod
    def _compute(self, year: int) -> YearTransitions:
        ...

    def transitions(self, year: int) -> YearTransitions:
        if not (self.min_year <= year <= self.max_year):
            raise UnsupportedYear(year, self.min_year, self.max_year)

        found = self._cache.get(year)
        if found is None:
            found = self._compute(year)
            self._cache[year] = found
        return found

    def spring_transition(self, year: int) -> Optional[datetime]:
        return self.transitions(year).spring

    def autumn_transition(self, year: int) -> Optional[datetime]:
        return self.transitions(year).autumn

    def classify(self, wall: WallClock) -> CivilStatus:
        return self.transitions(wall.year).classify(wall.to_datetime())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self.min_year}..{self.max_year})"


# ============================================================
# EU rule: last Sunday of March / October, 01:00 UTC
# ============================================================
def _last_sunday(year: int, month: int) -> int:
    last_day = calendar.monthrange(year, month)[1]
    weekday = calendar.weekday(year, month, last_day)  # Monday == 0
    return last_day - (weekday - calendar.SUNDAY) % 7


class EURule(ZoneRule):
    """
    EU summer time, in force since 1996.

    EURule(timedelta(hours=2), timedelta(hours=3)) behaves like Europe/Helsinki.
    """

    TRANSITION_HOUR_UTC = 1

    def __init__(
        self,
        standard: timedelta,
        daylight: timedelta,
        min_year: int = 1996,
        max_year: int = 2099,
        name: str = "EU",
    ):
        super().__init__(min_year, max_year)
        if daylight <= standard:
            raise UserInputError("daylight offset must be ahead of standard offset")
        self._standard = standard
        self._daylight = daylight
        self.name = name

    @property
    def standard_offset(self) -> timedelta:
        return self._standard

    @property
    def daylight_offset(self) -> timedelta:
        return self._daylight

    def _compute(self, year: int) -> YearTransitions:
        hour = self.TRANSITION_HOUR_UTC
        return YearTransitions(
            year=year,
            standard=self._standard,
            daylight=self._daylight,
            spring=datetime(year, 3, _last_sunday(year, 3), hour, tzinfo=timezone.utc),
            autumn=datetime(year, 10, _last_sunday(year, 10), hour, tzinfo=timezone.utc),
        )


# ============================================================
# IANA zone via zoneinfo
# ============================================================
class ZoneInfoRule(ZoneRule):
    """
    Transitions read from the tz database.

    Offsets are sampled per UTC day and each change is narrowed down to the
    second by bisection. Years with more than one change in either direction
    (Ramadan suspensions and the like) are not supported.
    """

    def __init__(self, key: str, min_year: int = 1996, max_year: int = 2037):
        super().__init__(min_year, max_year)
        try:
            self.zone = ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise UserInputError(f"unknown time zone {key!r}") from e
        self.name = key

        reference = self.transitions(max_year)
        self._standard = reference.standard
        self._daylight = reference.daylight

    @property
    def standard_offset(self) -> timedelta:
        return self._standard

    @property
    def daylight_offset(self) -> timedelta:
        return self._daylight

    def _offset(self, instant: datetime) -> timedelta:
        return instant.astimezone(self.zone).utcoffset()

    def _bisect(self, lo: datetime, hi: datetime) -> datetime:
        # offset(lo) != offset(hi); find the first second carrying offset(hi)
        before = self._offset(lo)
        while hi - lo > timedelta(seconds=1):
            mid = lo + timedelta(seconds=int((hi - lo).total_seconds()) // 2)
            if self._offset(mid) == before:
                lo = mid
            else:
                hi = mid
        return hi

    def _compute(self, year: int) -> YearTransitions:
        day = datetime(year, 1, 1, tzinfo=timezone.utc)
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)

        changes = []
        prev = self._offset(day)
        offsets = {prev}
        while day < end:
            nxt = day + timedelta(days=1)
            cur = self._offset(nxt)
            if cur != prev:
                changes.append((self._bisect(day, nxt), prev, cur))
                offsets.add(cur)
            day, prev = nxt, cur

        if not changes:
            return YearTransitions(year=year, standard=prev, daylight=prev)

        springs = [c for c in changes if c[2] > c[1]]
        autumns = [c for c in changes if c[2] < c[1]]
        if len(springs) != 1 or len(autumns) != 1 or len(offsets) != 2:
            # e.g. a permanent change of base offset (Europe/Moscow 2011, 2014)
            raise UnsupportedYear(
                year,
                reason=f"{self.name}: {len(springs)} forward and {len(autumns)} backward "
                f"offset changes, {len(offsets)} distinct offsets",
            )

        return YearTransitions(
            year=year,
            standard=min(offsets),
            daylight=max(offsets),
            spring=springs[0][0],
            autumn=autumns[0][0],
        )


# ============================================================
# configuration entry point
# ============================================================
_EU_KEY = re.compile(r"^EU:([+-]\d{2}):(\d{2})/([+-]\d{2}):(\d{2})$")


def _offset(hours: str, minutes: str) -> timedelta:
    sign = -1 if hours.startswith("-") else 1
    return sign * timedelta(hours=abs(int(hours)), minutes=int(minutes))


def load_zone_rule(key: str, min_year: int = 1996, max_year: int = 2037) -> ZoneRule:
    """
    Resolve a configured zone identifier.

    "EU:+02:00/+03:00" -> EURule with those offsets
    "Europe/Paris"     -> ZoneInfoRule
    """
    m = _EU_KEY.match(key.strip())
    if m:
        return EURule(
            standard=_offset(m.group(1), m.group(2)),
            daylight=_offset(m.group(3), m.group(4)),
            min_year=min_year,
            max_year=max_year,
            name=key.strip(),
        )
    return ZoneInfoRule(key.strip(), min_year=min_year, max_year=max_year)
