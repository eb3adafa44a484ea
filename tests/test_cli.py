from typer.testing import CliRunner

from elspot import __version__
from elspot.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_fix_file(tmp_path):
    path = tmp_path / "readings.txt"
    path.write_text("1445742000\n1445742000\nbad\n1445745600\n", encoding="utf-8")

    result = runner.invoke(app, ["fix", str(path), "--zone", "EU:+02:00/+03:00"])

    assert result.exit_code == 0
    assert "1445742000\t2015-10-25T00:00:00+00:00" in result.output
    assert "1445742000\t2015-10-25T01:00:00+00:00" in result.output
    assert "1445745600\t2015-10-25T02:00:00+00:00" in result.output


def test_fix_stdin_abort_on_error():
    result = runner.invoke(
        app,
        ["fix", "-", "--zone", "EU:+02:00/+03:00", "--abort-on-error"],
        input="1445742000\nbad\n",
    )

    assert result.exit_code == 1
    assert "ERROR" in result.output


def test_fix_unknown_zone(tmp_path):
    path = tmp_path / "readings.txt"
    path.write_text("1445742000\n", encoding="utf-8")

    result = runner.invoke(app, ["fix", str(path), "--zone", "Nowhere/Special"])

    assert result.exit_code == 1


def test_import_no_db(elspot_file, tmp_path):
    config = tmp_path / "config.yml"
    config.write_text(
        "zone:\n  key: 'EU:+01:00/+02:00'\n  min_year: 2010\n  max_year: 2020\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["import", str(elspot_file), "--config", str(config), "--no-db"])

    assert result.exit_code == 0
    assert "OK! 4 records parsed" in result.output


def test_import_missing_config(elspot_file, tmp_path):
    result = runner.invoke(app, ["import", str(elspot_file), "--config", str(tmp_path / "nope.yml")])
    assert result.exit_code == 1


def test_import_bad_price_to_parquet(elspot_html, tmp_path):
    source = tmp_path / "elspot-prices_2015_hourly_eur.xls"
    source.write_text(elspot_html.replace("19,99", "n/a"), encoding="utf-8")
    config = tmp_path / "config.yml"
    config.write_text("zone:\n  key: 'EU:+01:00/+02:00'\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["import", str(source), "--config", str(config), "--no-db", "--parquet", str(tmp_path / "out.parquet")],
    )

    assert result.exit_code == 1
    assert "ERROR" in result.output
    assert "bad price 'n/a'" in result.output
    assert not isinstance(result.exception, ValueError)


def test_fix_with_trace(tmp_path):
    path = tmp_path / "readings.txt"
    path.write_text("1445742000\nbad\n", encoding="utf-8")

    result = runner.invoke(app, ["fix", str(path), "--zone", "EU:+02:00/+03:00", "--trace"])

    assert result.exit_code == 0
    assert "1445742000\t2015-10-25T00:00:00+00:00" in result.output
