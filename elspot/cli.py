#!filepath: elspot/cli.py
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print

from elspot import __version__
from elspot.config.app_config import AppConfig
from elspot.config.ingest_config import MalformedPolicy
from elspot.tz.zone_rule import load_zone_rule
from elspot.utils.errors import LoadError, MalformedReading, TableFormatError, UserInputError
from elspot.utils.logger import init_logging

app = typer.Typer(help="Nordpool elspot importer with DST-corrected timestamps")


def _load_config(config: Optional[Path]) -> AppConfig:
    try:
        cfg = AppConfig.load(str(config) if config else None)
    except (FileNotFoundError, ValidationError) as e:
        print(f"[red]ERROR loading config: {e}[/red]")
        raise typer.Exit(code=1)
    init_logging(cfg.log)
    return cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command("import")
def import_file(
    filename: Path = typer.Argument(..., help="elspot 'xls' file"),
    connstring: Optional[str] = typer.Option(
        None, help="https://www.postgresql.org/docs/current/static/libpq-connect.html#LIBPQ-CONNSTRING"
    ),
    config: Optional[Path] = typer.Option(None, help="YAML config (default: bundled base.yml)"),
    trace: bool = typer.Option(False, help="trace execution time"),
    parquet: Optional[Path] = typer.Option(None, help="also write records to this parquet file"),
    no_db: bool = typer.Option(False, "--no-db", help="skip the PostgreSQL load"),
):
    """
    Import one elspot file into PostgreSQL
    """
    from elspot.workflows.elspot_import import build_import_pipeline

    cfg = _load_config(config)
    if connstring is not None:
        cfg.database.connstring = connstring

    try:
        pipeline = build_import_pipeline(cfg, trace=trace, parquet=parquet, skip_db=no_db)
        ctx = pipeline.run(filename)
    except UserInputError as e:
        print(f"[red]ERROR {e}[/red]")
        raise typer.Exit(code=1)
    except TableFormatError as e:
        print(f"[red]ERROR parsing elspot table: {e}[/red]")
        raise typer.Exit(code=1)
    except LoadError as e:
        print(f"[red]ERROR importing to PostgreSQL: {e}[/red]")
        raise typer.Exit(code=1)

    if ctx.abort_pipeline:
        print(f"[yellow]Nothing imported: {ctx.abort_reason}[/yellow]")
        raise typer.Exit(code=1)

    if ctx.rows_affected is not None:
        print(f"OK! {ctx.rows_affected} rows affected")
    else:
        print(f"OK! {len(ctx.records)} records parsed")


@app.command()
def fix(
    filename: Optional[Path] = typer.Argument(None, help="one reading per line; '-' or nothing for stdin"),
    zone: Optional[str] = typer.Option(None, help="zone key, e.g. Europe/Helsinki or EU:+02:00/+03:00"),
    config: Optional[Path] = typer.Option(None, help="YAML config (default: bundled base.yml)"),
    abort_on_error: bool = typer.Option(False, help="stop at the first malformed reading"),
    trace: bool = typer.Option(False, help="trace execution time and reading counts"),
):
    """
    Convert disguised elapsed-seconds readings to true UTC instants
    """
    from elspot.observability.instrumentation import Instrumentation, NoOpInstrumentation
    from elspot.workflows.fix_readings import fix_readings

    cfg = _load_config(config)
    policy = MalformedPolicy.ABORT if abort_on_error else cfg.ingest.on_malformed
    inst = Instrumentation(enabled=True) if trace else NoOpInstrumentation()
    source = "stdin" if filename is None or str(filename) == "-" else str(filename)

    try:
        if zone is not None:
            rule = load_zone_rule(zone, cfg.zone.min_year, cfg.zone.max_year)
        else:
            rule = cfg.zone_rule()

        if source == "stdin":
            result = fix_readings(sys.stdin, rule, on_malformed=policy, inst=inst)
        else:
            with open(filename, "r", encoding="utf-8") as f:
                result = fix_readings(f, rule, on_malformed=policy, inst=inst)
    except (UserInputError, MalformedReading) as e:
        print(f"[red]ERROR {e}[/red]")
        raise typer.Exit(code=1)
    except OSError as e:
        print(f"[red]ERROR opening readings: {e}[/red]")
        raise typer.Exit(code=1)

    inst.generate_timeline_report(source)
    for r in result.readings:
        typer.echo(f"{r.raw}\t{r.instant.isoformat()}")


if __name__ == "__main__":
    app()

# python -m elspot.cli import elspot-prices_2015_hourly_eur.xls --trace
