#!filepath: elspot/workflows/elspot_import.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from elspot.config.app_config import AppConfig
from elspot.engines.elspot_engine import ElspotParserEngine
from elspot.observability.instrumentation import Instrumentation, NoOpInstrumentation
from elspot.pipeline.pipeline import ImportPipeline
from elspot.pipeline.steps.export_parquet_step import ExportParquetStep
from elspot.pipeline.steps.load_postgres_step import LoadPostgresStep
from elspot.pipeline.steps.parse_html_step import ParseHtmlStep
from elspot.pipeline.steps.parse_table_step import ParseTableStep
from elspot.pipeline.steps.read_file_step import ReadFileStep
from elspot.storage.postgres_loader import PostgresLoader


def build_import_pipeline(
    cfg: AppConfig,
    trace: bool = False,
    parquet: Optional[str | Path] = None,
    skip_db: bool = False,
) -> ImportPipeline:
    """
    file -> html tables -> DST-fixed records -> [parquet] -> [postgres]
    """
    inst = Instrumentation(enabled=True) if trace else NoOpInstrumentation()

    engine = ElspotParserEngine(
        rule=cfg.zone_rule(),
        header_row=cfg.ingest.header_row,
        area_column=cfg.ingest.area_column,
    )

    steps = [
        ReadFileStep(inst=inst),
        ParseHtmlStep(inst=inst),
        ParseTableStep(engine, inst=inst),
    ]

    if parquet is not None:
        steps.append(ExportParquetStep(parquet, inst=inst))

    if not skip_db:
        db = cfg.database
        loader = PostgresLoader(
            connstring=db.connstring,
            target_table=db.target_table,
            tmp_table=db.tmp_table,
            area=db.area,
            connect_attempts=db.connect_attempts,
            inst=inst,
        )
        steps.append(LoadPostgresStep(loader, inst=inst))

    return ImportPipeline(steps, inst)
