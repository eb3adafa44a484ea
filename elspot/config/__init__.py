from .app_config import AppConfig
from .db_config import DatabaseConfig
from .ingest_config import IngestConfig, MalformedPolicy
from .log_config import LogConfig
from .zone_config import ZoneConfig

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "IngestConfig",
    "LogConfig",
    "MalformedPolicy",
    "ZoneConfig",
]
