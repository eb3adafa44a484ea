#!filepath: elspot/pipeline/steps/export_parquet_step.py
from __future__ import annotations

from pathlib import Path

from elspot.pipeline.context import ImportContext
from elspot.pipeline.step import PipelineStep
from elspot.storage.parquet_sink import write_records


class ExportParquetStep(PipelineStep):
    stage = "export parquet"

    def __init__(self, path: str | Path, inst=None):
        super().__init__(inst)
        self.path = Path(path)

    def run(self, ctx: ImportContext) -> ImportContext:
        with self.timed():
            ctx.parquet_rows = write_records(ctx.records, self.path)
        return ctx
