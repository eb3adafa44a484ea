#!filepath: elspot/config/ingest_config.py
from enum import Enum

from pydantic import BaseModel


class MalformedPolicy(str, Enum):
    SKIP = "skip"
    ABORT = "abort"


class IngestConfig(BaseModel):
    header_row: int = 2
    area_column: str = "SYS"
    on_malformed: MalformedPolicy = MalformedPolicy.SKIP
