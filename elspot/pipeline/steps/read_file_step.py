#!filepath: elspot/pipeline/steps/read_file_step.py
from __future__ import annotations

from elspot import logs
from elspot.pipeline.context import ImportContext
from elspot.pipeline.step import PipelineStep
from elspot.utils.errors import UserInputError


class ReadFileStep(PipelineStep):
    stage = "open file"

    def __init__(self, encoding: str = "utf-8", inst=None):
        super().__init__(inst)
        self.encoding = encoding

    def run(self, ctx: ImportContext) -> ImportContext:
        with self.timed():
            try:
                # stray non-utf-8 bytes are replaced
                ctx.text = ctx.source.read_text(encoding=self.encoding, errors="replace")
            except OSError as e:
                raise UserInputError(f"opening data file: {e}") from e

        logs.debug(f"[{self.step_name}] read {len(ctx.text)} chars from {ctx.source}")
        return ctx
