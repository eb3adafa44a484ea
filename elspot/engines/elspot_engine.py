#!filepath: elspot/engines/elspot_engine.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

from elspot.engines.htmltable import Table
from elspot.tz.batch import RecordList, fix_dst
from elspot.tz.zone_rule import ZoneRule
from elspot.utils.errors import TableFormatError

TIME_LAYOUT = "%d-%m-%Y %H"


@dataclass
class ElspotRecord:
    ts: datetime
    prices: Dict[str, str] = field(default_factory=dict)


class ElspotParserEngine:
    """
    ElspotParserEngine

    Input:
      - first Table of a Nordpool elspot "xls" (really an HTML table)

        header row <header_row>:  ["", "Hours", "SYS", "SE1", ..., "FI", ...]
        data rows:                ["25-10-2015", "03 - 04", "20,32", ...]

    Output:
      - ElspotRecord per hour with a true UTC instant

    Rules:
      - "," decimal separator -> "."
      - rows with an empty <area_column> price are dropped
      - hour = first two characters of the hours cell
      - timestamps are local wall clock until fix_dst() runs over the whole
        file, so the repeated autumn hour comes out daylight first
    """

    def __init__(self, rule: ZoneRule, header_row: int = 2, area_column: str = "SYS"):
        self.rule = rule
        self.header_row = header_row
        self.area_column = area_column

    # --------------------------------------------------
    def execute(self, table: Table) -> List[ElspotRecord]:
        if len(table.headers) <= self.header_row:
            raise TableFormatError(
                f"expected header row {self.header_row}, table has {len(table.headers)} header rows"
            )
        header = table.headers[self.header_row]

        records: List[ElspotRecord] = []
        for n, row in enumerate(table.rows):
            prices = {k: row[i].replace(",", ".") if i < len(row) else "" for i, k in enumerate(header)}
            if prices.get(self.area_column, "") == "":
                continue

            records.append(ElspotRecord(ts=self._wall_clock(n, row), prices=prices))

        fix_dst(RecordList(records), self.rule)
        return records

    @staticmethod
    def _wall_clock(n: int, row: List[str]) -> datetime:
        if len(row) < 2:
            raise TableFormatError(f"row {n}: expected date and hour cells, got {row!r}")
        try:
            return datetime.strptime(f"{row[0]} {row[1][0:2]}", TIME_LAYOUT)
        except ValueError as e:
            raise TableFormatError(f"row {n}: parsing timestamp: {e}") from e
