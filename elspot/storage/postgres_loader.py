#!filepath: elspot/storage/postgres_loader.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, List

import psycopg
from psycopg import sql

from elspot import logs
from elspot.engines.elspot_engine import ElspotRecord
from elspot.observability.instrumentation import Instrumentation, NoOpInstrumentation
from elspot.utils.errors import LoadError
from elspot.utils.retry import Retry


class PostgresLoader:
    """
    Idempotent bulk load of elspot records into PostgreSQL.

    Flow (one transaction):
      1. CREATE TABLE IF NOT EXISTS <target>
      2. CREATE TEMP TABLE <tmp> ON COMMIT DROP AS SELECT * FROM <target> WITH NO DATA
      3. COPY records -> <tmp>
      4. INSERT INTO <target> SELECT ... FROM <tmp> ON CONFLICT DO NOTHING
      5. COMMIT

    Re-importing the same file affects 0 rows.
    """

    def __init__(
        self,
        connstring: str,
        target_table: str = "elspot",
        tmp_table: str = "elspot_import",
        area: str = "FI",
        connect_attempts: int = 3,
        inst: Instrumentation | None = None,
    ):
        self.connstring = connstring
        self.target_table = target_table
        self.tmp_table = tmp_table
        self.area = area
        self.connect_attempts = connect_attempts
        self.inst = inst if inst is not None else NoOpInstrumentation()

    # --------------------------------------------------
    # SQL
    # --------------------------------------------------
    def _create_table_sql(self) -> sql.Composed:
        return sql.SQL(
            "CREATE TABLE IF NOT EXISTS {target} (ts timestamptz PRIMARY KEY, {area} numeric)"
        ).format(target=sql.Identifier(self.target_table), area=sql.Identifier(self.area))

    def _create_temp_sql(self) -> sql.Composed:
        return sql.SQL(
            "CREATE TEMP TABLE {tmp} ON COMMIT DROP AS SELECT * FROM {target} WITH NO DATA"
        ).format(tmp=sql.Identifier(self.tmp_table), target=sql.Identifier(self.target_table))

    def _copy_sql(self) -> sql.Composed:
        return sql.SQL("COPY {tmp} (ts, {area}) FROM STDIN").format(
            tmp=sql.Identifier(self.tmp_table), area=sql.Identifier(self.area)
        )

    def _insert_sql(self) -> sql.Composed:
        return sql.SQL(
            "INSERT INTO {target} (ts, {area}) SELECT ts, {area} FROM {tmp} ON CONFLICT DO NOTHING"
        ).format(
            target=sql.Identifier(self.target_table),
            area=sql.Identifier(self.area),
            tmp=sql.Identifier(self.tmp_table),
        )

    # --------------------------------------------------
    @contextmanager
    def _stage(self, name: str):
        with self.inst.timer(name):
            try:
                yield
            except psycopg.Error as e:
                raise LoadError(name, e) from e

    def rows(self, records: Iterable[ElspotRecord]) -> List[tuple]:
        """(ts, price) for every record with a price in the loaded area."""
        return [(r.ts, r.prices[self.area]) for r in records if r.prices.get(self.area, "") != ""]

    def connect(self) -> psycopg.Connection:
        with self._stage("connect to database"):
            return Retry.run(
                psycopg.connect,
                self.connstring,
                exceptions=(psycopg.OperationalError,),
                max_attempts=self.connect_attempts,
                delay=0.5,
            )

    def load(self, records: Iterable[ElspotRecord]) -> int:
        rows = self.rows(records)
        conn = self.connect()

        try:
            with conn.cursor() as cur:
                with self._stage("table exists"):
                    cur.execute(self._create_table_sql())
                    conn.commit()

                with self._stage("create temp table"):
                    cur.execute(self._create_temp_sql())

                with self._stage("load data into temp table"):
                    with cur.copy(self._copy_sql()) as copy:
                        for row in rows:
                            copy.write_row(row)

                with self._stage("copy data to target table"):
                    cur.execute(self._insert_sql())
                    rows_affected = cur.rowcount

            with self._stage("commit transaction"):
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

        logs.info(
            f"[PostgresLoader] {self.target_table}.{self.area}: "
            f"staged={len(rows)} inserted={rows_affected}"
        )
        return rows_affected
