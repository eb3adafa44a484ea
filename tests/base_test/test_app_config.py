#!filepath: tests/base_test/test_app_config.py
import yaml
import pytest
from datetime import timedelta

from pydantic import ValidationError

from elspot.config import AppConfig
from elspot.config.log_config import LogConfig
from elspot.config.zone_config import ZoneConfig
from elspot.config.db_config import DatabaseConfig
from elspot.config.ingest_config import IngestConfig, MalformedPolicy
from elspot.tz.zone_rule import EURule, ZoneInfoRule


@pytest.fixture
def sample_config_file(tmp_path):
    data = {
        "log": {
            "dir": str(tmp_path / "logs"),
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG",
        },
        "zone": {
            "key": "EU:+02:00/+03:00",
            "min_year": 2010,
            "max_year": 2020,
        },
        "database": {
            "connstring": "host=db dbname=prices",
            "target_table": "elspot_fi",
            "area": "FI",
        },
        "ingest": {
            "header_row": 1,
            "on_malformed": "abort",
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file, monkeypatch):
    monkeypatch.delenv("ELSPOT_CONNSTRING", raising=False)
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.zone, ZoneConfig)
    assert isinstance(cfg.database, DatabaseConfig)
    assert isinstance(cfg.ingest, IngestConfig)

    assert cfg.log.level == "DEBUG"
    assert cfg.database.connstring == "host=db dbname=prices"
    assert cfg.database.tmp_table == "elspot_import"
    assert cfg.ingest.header_row == 1
    assert cfg.ingest.on_malformed is MalformedPolicy.ABORT


def test_zone_rule_from_config(sample_config_file):
    rule = AppConfig.load(path=str(sample_config_file)).zone_rule()

    assert isinstance(rule, EURule)
    assert rule.standard_offset == timedelta(hours=2)
    assert (rule.min_year, rule.max_year) == (2010, 2020)


def test_default_config(monkeypatch):
    monkeypatch.delenv("ELSPOT_CONNSTRING", raising=False)
    cfg = AppConfig.load()

    assert cfg.zone.key == "Europe/Paris"
    assert cfg.database.area == "FI"
    assert cfg.ingest.area_column == "SYS"
    assert isinstance(cfg.zone_rule(), ZoneInfoRule)


def test_connstring_from_env(sample_config_file, monkeypatch):
    monkeypatch.setenv("ELSPOT_CONNSTRING", "host=elsewhere")
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.database.connstring == "host=elsewhere"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "missing.yml"))


def test_bad_years_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"zone": {"min_year": 2030, "max_year": 2020}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))


def test_bad_policy_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"ingest": {"on_malformed": "ignore"}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))
