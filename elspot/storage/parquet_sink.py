#!filepath: elspot/storage/parquet_sink.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import pyarrow as pa
import pyarrow.parquet as pq

from elspot import logs
from elspot.engines.elspot_engine import ElspotRecord
from elspot.utils.errors import TableFormatError


def _price(area: str, value: str) -> Optional[float]:
    value = (value or "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise TableFormatError(f"area {area}: bad price {value!r}") from None


def build_table(records: List[ElspotRecord], areas: Iterable[str]) -> pa.Table:
    """
    ts (timestamp[us, UTC]) + one float64 column per area, empty price -> null.
    """
    columns = {"ts": pa.array([r.ts for r in records], type=pa.timestamp("us", tz="UTC"))}
    for area in areas:
        columns[area] = pa.array([_price(area, r.prices.get(area, "")) for r in records], type=pa.float64())
    return pa.table(columns)


def write_records(
    records: List[ElspotRecord],
    path: str | Path,
    areas: Optional[Iterable[str]] = None,
) -> int:
    """
    Atomic write (tmp file -> rename). Returns rows written.

    areas defaults to every column after the date and hour columns.
    """
    path = Path(path)
    if areas is None:
        areas = list(records[0].prices)[2:] if records else []

    table = build_table(records, list(areas))

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".tmp")
    pq.write_table(table, tmp_path, compression="zstd")
    tmp_path.replace(path)

    logs.info(f"[Parquet] wrote {table.num_rows} rows -> {path}")
    return table.num_rows
