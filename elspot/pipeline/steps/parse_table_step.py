#!filepath: elspot/pipeline/steps/parse_table_step.py
from __future__ import annotations

from elspot import logs
from elspot.engines.elspot_engine import ElspotParserEngine
from elspot.pipeline.context import ImportContext
from elspot.pipeline.step import PipelineStep


class ParseTableStep(PipelineStep):
    stage = "parse table"

    def __init__(self, engine: ElspotParserEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: ImportContext) -> ImportContext:
        with self.timed():
            ctx.records = self.engine.execute(ctx.tables[0])

        self.inst.metrics.record("records", len(ctx.records))
        if not ctx.records:
            ctx.abort_pipeline = True
            ctx.abort_reason = "no priced rows in table"
            return ctx

        logs.info(
            f"[{self.step_name}] {len(ctx.records)} records "
            f"{ctx.records[0].ts.isoformat()} .. {ctx.records[-1].ts.isoformat()}"
        )
        return ctx
