#!filepath: elspot/config/db_config.py
from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    # https://www.postgresql.org/docs/current/static/libpq-connect.html#LIBPQ-CONNSTRING
    connstring: str = "sslmode=disable"
    target_table: str = "elspot"
    tmp_table: str = "elspot_import"
    area: str = "FI"
    connect_attempts: int = 3
