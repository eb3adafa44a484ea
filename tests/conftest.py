# tests/conftest.py
from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
from loguru import logger

from elspot.tz.zone_rule import EURule, ZoneInfoRule


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


# ------------------------------------------------------------
# zone rules: standard +02:00, daylight +03:00
# ------------------------------------------------------------
@pytest.fixture(scope="session")
def eet_rule() -> EURule:
    return EURule(timedelta(hours=2), timedelta(hours=3), min_year=1996, max_year=2037)


@pytest.fixture(scope="session")
def helsinki_rule() -> ZoneInfoRule:
    return ZoneInfoRule("Europe/Helsinki", min_year=2000, max_year=2030)


@pytest.fixture(params=["eu", "zoneinfo"], scope="session")
def rule(request, eet_rule, helsinki_rule):
    """Both EET implementations must behave the same."""
    return eet_rule if request.param == "eu" else helsinki_rule


@pytest.fixture(scope="session")
def disguise():
    """
    Reproduce the upstream defect: local wall clock digits read as if UTC.
    """

    def _disguise(instant: datetime, zone: str = "Europe/Helsinki") -> str:
        local = instant.astimezone(ZoneInfo(zone))
        return str(calendar.timegm(local.replace(tzinfo=None).timetuple()))

    return _disguise


# ------------------------------------------------------------
# elspot "xls" (HTML table), Europe/Paris wall clock, autumn 2015
# ------------------------------------------------------------
ELSPOT_HTML = """<html><head><meta charset="utf-8"></head><body>
<table>
<thead>
<tr><td colspan="4">Elspot Prices in EUR/MWh</td></tr>
<tr><td colspan="4">Data was last updated 26-10-2015</td></tr>
<tr><td></td><td>Hours</td><td>SYS</td><td>FI</td></tr>
</thead>
<tbody>
<tr><td>25-10-2015</td><td>01&nbsp;-&nbsp;02</td><td>20,10</td><td>21,00</td></tr>
<tr><td>25-10-2015</td><td>02&nbsp;-&nbsp;03</td><td>19,95</td><td>20,50</td></tr>
<tr><td>25-10-2015</td><td>02&nbsp;-&nbsp;03</td><td>19,80</td><td></td></tr>
<tr><td>25-10-2015</td><td>03&nbsp;-&nbsp;04</td><td>19,40</td><td>19,99</td></tr>
<tr><td>25-10-2015</td><td>04&nbsp;-&nbsp;05</td><td></td><td></td></tr>
</tbody>
</table>
</body></html>
"""


@pytest.fixture
def elspot_html() -> str:
    return ELSPOT_HTML


@pytest.fixture
def elspot_file(tmp_path, elspot_html):
    p = tmp_path / "elspot-prices_2015_hourly_eur.xls"
    p.write_text(elspot_html, encoding="utf-8")
    return p


@pytest.fixture(scope="session")
def paris_rule() -> EURule:
    return EURule(timedelta(hours=1), timedelta(hours=2), min_year=2000, max_year=2037)
