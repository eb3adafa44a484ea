#!filepath: elspot/pipeline/steps/load_postgres_step.py
from __future__ import annotations

from elspot.pipeline.context import ImportContext
from elspot.pipeline.step import PipelineStep
from elspot.storage.postgres_loader import PostgresLoader


class LoadPostgresStep(PipelineStep):
    stage = "load to postgres"

    def __init__(self, loader: PostgresLoader, inst=None):
        super().__init__(inst)
        self.loader = loader

    def run(self, ctx: ImportContext) -> ImportContext:
        with self.timed():
            ctx.rows_affected = self.loader.load(ctx.records)

        self.inst.metrics.record("rows_affected", ctx.rows_affected)
        return ctx
