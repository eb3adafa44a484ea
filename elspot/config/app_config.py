#!filepath: elspot/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .zone_config import ZoneConfig
from .db_config import DatabaseConfig
from .ingest_config import IngestConfig
from elspot.tz.zone_rule import ZoneRule, load_zone_rule


def package_root() -> str:
    """
    elspot/config/app_config.py -> elspot/config -> elspot
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    zone: ZoneConfig = ZoneConfig()
    database: DatabaseConfig = DatabaseConfig()
    ingest: IngestConfig = IngestConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        YAML config + .env
        - default: elspot/config/base.yml
        - ELSPOT_CONNSTRING overrides database.connstring
        """
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        connstring = os.getenv("ELSPOT_CONNSTRING")
        if connstring:
            raw.setdefault("database", {})
            raw["database"]["connstring"] = connstring

        return cls(**raw)

    def zone_rule(self) -> ZoneRule:
        return load_zone_rule(self.zone.key, self.zone.min_year, self.zone.max_year)
