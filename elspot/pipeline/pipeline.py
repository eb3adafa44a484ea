#!filepath: elspot/pipeline/pipeline.py
from __future__ import annotations

from pathlib import Path

from elspot import logs
from elspot.pipeline.context import ImportContext
from elspot.pipeline.step import PipelineStep
from elspot.observability.instrumentation import Instrumentation, NoOpInstrumentation


class ImportPipeline:
    """
    ImportPipeline = scheduler

    - runs steps in order over one ImportContext
    - stops early when a step sets abort_pipeline
    - the timeline only holds what the steps record
    """

    def __init__(
            self,
            steps: list[PipelineStep],
            inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.inst = inst if inst is not None else NoOpInstrumentation()

    def run(self, source: str | Path) -> ImportContext:
        source = Path(source)
        logs.info(f"[Pipeline] ====== START {source.name} ======")

        ctx = ImportContext(source=source)

        for step in self.steps:
            ctx = step.run(ctx)
            if ctx.abort_pipeline:
                logs.warning(f"[Pipeline] aborted at {step.step_name}: {ctx.abort_reason}")
                break

        self.inst.generate_timeline_report(source.name)
        logs.info(f"[Pipeline] ====== END {source.name} ======")

        return ctx
