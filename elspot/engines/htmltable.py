#!filepath: elspot/engines/htmltable.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import List, Optional

from elspot.utils.errors import TableFormatError

_WS = re.compile(r"\s+")


@dataclass
class Table:
    """
    One HTML table.

    headers: rows inside <thead>, or made only of <th> cells
    rows:    every other non-empty row
    """

    headers: List[List[str]] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


class _TableCollector(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.tables: List[Table] = []
        self._table: Optional[Table] = None
        self._row: Optional[List[str]] = None
        self._row_is_header = True
        self._in_thead = False
        self._cell: Optional[List[str]] = None
        self._colspan = 1

    # --------------------------------------------------
    # cell / row bookkeeping (end tags are optional in HTML)
    # --------------------------------------------------
    def _close_cell(self):
        if self._cell is None:
            return
        text = _WS.sub(" ", "".join(self._cell)).strip()
        self._row.extend([text] * self._colspan)
        self._cell = None

    def _close_row(self):
        self._close_cell()
        if self._row is None:
            return
        if self._row:
            if self._in_thead or self._row_is_header:
                self._table.headers.append(self._row)
            else:
                self._table.rows.append(self._row)
        self._row = None

    def _open_row(self):
        self._close_row()
        self._row = []
        self._row_is_header = True

    # --------------------------------------------------
    def handle_starttag(self, tag, attrs):
        if tag == "table":
            self._table = Table()
            self.tables.append(self._table)
            return
        if self._table is None:
            return

        if tag == "thead":
            self._close_row()
            self._in_thead = True
        elif tag in ("tbody", "tfoot"):
            self._close_row()
            self._in_thead = False
        elif tag == "tr":
            self._open_row()
        elif tag in ("td", "th"):
            if self._row is None:
                self._open_row()
            self._close_cell()
            if tag == "td":
                self._row_is_header = False
            self._cell = []
            try:
                self._colspan = max(1, int(dict(attrs).get("colspan") or 1))
            except ValueError:
                self._colspan = 1
        elif tag == "br" and self._cell is not None:
            self._cell.append(" ")

    def handle_endtag(self, tag):
        if self._table is None:
            return
        if tag in ("td", "th"):
            self._close_cell()
        elif tag == "tr":
            self._close_row()
        elif tag == "thead":
            self._close_row()
            self._in_thead = False
        elif tag == "table":
            self._close_row()
            self._in_thead = False
            self._table = None

    def handle_data(self, data):
        if self._cell is not None:
            self._cell.append(data)


def parse_tables(text: str) -> List[Table]:
    """
    Every <table> in text, in document order.

    Raises TableFormatError when the document holds no table.
    """
    collector = _TableCollector()
    collector.feed(text)
    collector.close()
    if collector._table is not None:
        # unterminated <table>
        collector._close_row()

    if not collector.tables:
        raise TableFormatError("no <table> found in document")
    return collector.tables
