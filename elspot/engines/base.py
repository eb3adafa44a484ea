#!filepath: elspot/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Iterable


InEvent = TypeVar("InEvent")
OutEvent = TypeVar("OutEvent")


class BaseEngine(ABC, Generic[InEvent, OutEvent]):
    """
    Engine base class (atomic engine layer):

    - no I/O (no files / sockets / database)
    - pure "input event -> output event" logic
    - reusable from the import pipeline, the CLI and tests
    """

    @abstractmethod
    def process(self, event: InEvent) -> OutEvent:
        """
        Handle one event (smallest unit of work).
        """
        raise NotImplementedError

    def process_stream(self, events: Iterable[InEvent]) -> Iterable[OutEvent]:
        """
        Handle a stream of events in order, one process() call each.
        Stateful engines rely on this ordering.
        """
        for ev in events:
            yield self.process(ev)
