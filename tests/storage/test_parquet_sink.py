from datetime import datetime, timezone

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from elspot.engines.elspot_engine import ElspotRecord
from elspot.storage.parquet_sink import write_records
from elspot.utils.errors import TableFormatError


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def make_records():
    return [
        ElspotRecord(utc(2015, 10, 25, 0), {"": "25-10-2015", "Hours": "02 - 03", "SYS": "19.95", "FI": "20.50"}),
        ElspotRecord(utc(2015, 10, 25, 1), {"": "25-10-2015", "Hours": "02 - 03", "SYS": "19.80", "FI": ""}),
    ]


def test_write_records_default_areas(tmp_path):
    path = tmp_path / "out" / "elspot.parquet"

    n = write_records(make_records(), path)

    assert n == 2
    table = pq.read_table(path)
    assert table.column_names == ["ts", "SYS", "FI"]
    assert table.schema.field("ts").type == pa.timestamp("us", tz="UTC")
    assert table["SYS"].to_pylist() == [19.95, 19.80]
    assert table["FI"].to_pylist() == [20.5, None]
    assert not path.with_suffix(".tmp").exists()


def test_write_records_selected_area(tmp_path):
    path = tmp_path / "fi.parquet"

    write_records(make_records(), path, areas=["FI"])

    table = pq.read_table(path)
    assert table.column_names == ["ts", "FI"]
    assert table["ts"].to_pylist() == [utc(2015, 10, 25, 0), utc(2015, 10, 25, 1)]


def test_write_records_empty(tmp_path):
    path = tmp_path / "empty.parquet"

    assert write_records([], path) == 0
    assert pq.read_table(path).num_rows == 0


def test_write_records_bad_price(tmp_path):
    records = make_records()
    records[1].prices["FI"] = "n/a"
    path = tmp_path / "elspot.parquet"

    with pytest.raises(TableFormatError, match="area FI: bad price 'n/a'"):
        write_records(records, path)

    assert not path.exists()
