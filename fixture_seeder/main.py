from __future__ import annotations

import sys

import typer

from fixture_seeder.config import get_settings
from fixture_seeder.fixtures import build_user_fixtures
from fixture_seeder.infrastructure.mongo_factory import mongo_client
from fixture_seeder.reporter import print_fixtures
from fixture_seeder.seeder import COLLECTION_NAME, DATABASE_NAME, run_seed
from fixture_seeder.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Seed MongoDB with the sample users used by migration examples.")

log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective connection settings and the fixed seed target.
    """
    settings = get_settings()
    typer.echo(
        f"URI={settings.redacted_connection_string()} | "
        f"target={DATABASE_NAME}.{COLLECTION_NAME} | "
        f"timeout={settings.mongo_timeout_seconds}s env={settings.app_env}"
    )


@app.command()
def show() -> None:
    """
    Preview the fixture records without connecting to MongoDB.
    """
    print_fixtures(build_user_fixtures())


@app.command()
def seed() -> None:
    """
    Insert the sample users into the fixed target and print a summary.

    The collection is not cleared first; running twice duplicates the data.
    A failure is logged once, with its traceback, and the command exits with
    status 1.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        with mongo_client(settings) as client:
            run_seed(client)
    except Exception:
        log.exception("Seeding %s.%s failed", DATABASE_NAME, COLLECTION_NAME)
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
