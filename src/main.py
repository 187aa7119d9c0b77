from __future__ import annotations

import sys
from typing import Optional

import typer

from src.config import get_settings
from src.domain.errors import DatabaseConnectionError
from src.inserter import run as run_insert
from src.reporter import print_connection_failure, print_outcome, version_line
from src.utils.logging import configure_logging

EXIT_CONNECTION_FAILED = 1
EXIT_INSERT_FAILED = 2

app = typer.Typer(help="Record Inserter CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    password = "***" if settings.db_password else "(empty)"
    typer.echo(
        f"DB={settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name} | "
        f"password={password} env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def run() -> None:
    """
    Insert one synthetic record into the `dados` table and report the result.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    typer.echo(version_line())
    try:
        outcome = run_insert(settings.connection_config())
    except DatabaseConnectionError as exc:
        print_connection_failure(exc)
        raise typer.Exit(code=EXIT_CONNECTION_FAILED)

    print_outcome(outcome)
    if not outcome.ok:
        raise typer.Exit(code=EXIT_INSERT_FAILED)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default from settings)."),
) -> None:
    """
    Serve the insert page over HTTP.
    """
    from src.web import create_app

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    create_app(settings).run(host=host or settings.web_host, port=port or settings.web_port)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
