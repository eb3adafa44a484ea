#!filepath: elspot/workflows/fix_readings.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List

from elspot import logs
from elspot.config.ingest_config import MalformedPolicy
from elspot.observability.instrumentation import NoOpInstrumentation
from elspot.tz.resolver import DstResolver
from elspot.tz.zone_rule import ZoneRule
from elspot.utils.errors import MalformedReading


@dataclass
class FixedReading:
    raw: str
    instant: datetime


@dataclass
class FixResult:
    readings: List[FixedReading] = field(default_factory=list)
    malformed: List[MalformedReading] = field(default_factory=list)


def fix_readings(
    lines: Iterable[str],
    rule: ZoneRule,
    on_malformed: MalformedPolicy | str = MalformedPolicy.SKIP,
    inst=None,
) -> FixResult:
    """
    One stream of disguised counters (one per line) -> true UTC instants.

    Blank lines are ignored. A malformed line is logged and skipped, or
    re-raised under MalformedPolicy.ABORT; either way the resolver state
    is unaffected by it.

    Metrics (on inst): "fixed", "malformed".
    """
    policy = MalformedPolicy(on_malformed)
    inst = inst or NoOpInstrumentation()
    resolver = DstResolver(rule)
    result = FixResult()

    with inst.timer("fix readings"):
        for n, line in enumerate(lines, start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                instant = resolver.parse_broken_time(raw)
            except MalformedReading as e:
                inst.metrics.incr("malformed")
                if policy is MalformedPolicy.ABORT:
                    raise
                logs.warning(f"[fix_readings] line {n}: {e}")
                result.malformed.append(e)
                continue
            inst.metrics.incr("fixed")
            result.readings.append(FixedReading(raw=raw, instant=instant))

    logs.info(f"[fix_readings] fixed={len(result.readings)} malformed={len(result.malformed)}")
    return result
