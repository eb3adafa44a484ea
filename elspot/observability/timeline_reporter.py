#!filepath: elspot/observability/timeline_reporter.py
from typing import Any, Dict, Optional
from elspot import logs


class TimelineReporter:
    """
    Run report for one source file:
    - stage -> elapsed seconds
    - counters (records, rows_affected, fixed, malformed, ...)
    """

    def __init__(self, timeline: Dict[str, float], source: str, counts: Optional[Dict[str, Any]] = None):
        self.timeline = timeline
        self.source = source
        self.counts = counts or {}

    def print(self):
        logs.info(f"[Timeline] ===== Timeline for {self.source} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")
            total += sec

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")
        for name, value in self.counts.items():
            logs.info(f"[Timeline] {str(name):<30} {value!s:>9}")
        logs.info("[Timeline] ===========================================")
