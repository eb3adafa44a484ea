#!filepath: elspot/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from elspot.engines.elspot_engine import ElspotRecord
from elspot.engines.htmltable import Table


@dataclass
class ImportContext:
    """
    ImportContext = the only carrier between import steps

    - the pipeline builds it
    - each step fills in its own slot
    - no business logic here
    """

    # -------------------------
    # input
    # -------------------------
    source: Path

    # -------------------------
    # intermediate
    # -------------------------
    text: Optional[str] = None
    tables: List[Table] = field(default_factory=list)
    records: List[ElspotRecord] = field(default_factory=list)

    # -------------------------
    # results
    # -------------------------
    rows_affected: Optional[int] = None
    parquet_rows: Optional[int] = None

    # -------- runtime flags --------
    abort_pipeline: bool = False
    abort_reason: Optional[str] = None
