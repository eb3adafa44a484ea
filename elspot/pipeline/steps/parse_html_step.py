#!filepath: elspot/pipeline/steps/parse_html_step.py
from __future__ import annotations

from elspot import logs
from elspot.engines.htmltable import parse_tables
from elspot.pipeline.context import ImportContext
from elspot.pipeline.step import PipelineStep


class ParseHtmlStep(PipelineStep):
    stage = "parse html"

    def run(self, ctx: ImportContext) -> ImportContext:
        with self.timed():
            ctx.tables = parse_tables(ctx.text or "")

        logs.debug(f"[{self.step_name}] {len(ctx.tables)} tables")
        return ctx
