#!filepath: elspot/pipeline/step.py
from __future__ import annotations

from elspot.pipeline.context import ImportContext
from elspot.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Import step base class

    - one step = one stage of the import (read / parse / load ...)
    - the stage label is what --trace prints
    - steps never depend on whether instrumentation is enabled
    """

    stage: str = ""  # e.g. "parse html"

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def timed(self):
        """Leaf timer for this step's stage."""
        return self.inst.timer(self.stage or self.step_name)

    def run(self, ctx: ImportContext) -> ImportContext:
        raise NotImplementedError
