#!filepath: elspot/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from elspot.observability.timer import Timer
from elspot.observability.metrics import MetricRecorder
from elspot.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Stage timing + metrics for one import run.

    Rules:
    1. the timeline only holds leaf stages (record=True)
    2. parent scopes (record=False) only bound wall time, no side effects
    3. no logging on the hot path; the timeline is reported once at the end
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            stage name, e.g. "parse html"
        record : bool
            - True  : leaf, written to the timeline
            - False : parent scope only
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def generate_timeline_report(self, source: str):
        TimelineReporter(self.timeline, source, self.metrics.metrics).print()


class NoOpInstrumentation:
    """Used when tracing is off."""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, source: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
