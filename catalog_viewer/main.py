from __future__ import annotations

import sys
from typing import Callable, List, TypeVar

import oracledb
import typer

from catalog_viewer.config import get_settings
from catalog_viewer.exceptions import CatalogViewerError
from catalog_viewer.infrastructure.db_factory import get_sync_pool
from catalog_viewer.infrastructure.executor import OracleQueryExecutor
from catalog_viewer.inspector import CatalogInspector, DatabaseViewer
from catalog_viewer.reporter import render_table_information, table_information_to_json
from catalog_viewer.utils.logging import configure_logging

app = typer.Typer(help="Oracle catalog viewer CLI.")

T = TypeVar("T")


def _default_viewer() -> DatabaseViewer:
    return CatalogInspector(OracleQueryExecutor(get_sync_pool()))


viewer_factory: Callable[[], DatabaseViewer] = _default_viewer


def _viewer() -> DatabaseViewer:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return viewer_factory()


def _run(operation: Callable[[DatabaseViewer], T]) -> T:
    """Run one viewer operation, turning known failures into exit code 1."""
    try:
        return operation(_viewer())
    except (CatalogViewerError, oracledb.Error) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _echo_lines(lines: List[str]) -> None:
    for line in lines:
        typer.echo(line)


@app.command()
def info() -> None:
    """
    Show effective connection settings.
    """
    settings = get_settings()
    password = "***" if settings.db_password else "(unset)"
    typer.echo(
        f"connection={settings.db_connection_name} | "
        f"DB={settings.db_user or '(unset)'}@{settings.db_url} password={password} | "
        f"pool=({settings.db_pool_min},{settings.db_pool_max})"
    )


@app.command()
def schemas() -> None:
    """List schemas (database users)."""
    _echo_lines(_run(lambda viewer: viewer.get_schemas()))


@app.command()
def tables() -> None:
    """List tables visible to the connected user."""
    _echo_lines(_run(lambda viewer: viewer.get_tables()))


@app.command()
def columns(table: str = typer.Argument(..., help="Table name as stored in the catalog.")) -> None:
    """List the columns of a table in catalog order."""
    _echo_lines(_run(lambda viewer: viewer.get_columns(table)))


@app.command()
def describe(
    table: str = typer.Argument(..., help="Table name as stored in the catalog."),
    as_json: bool = typer.Option(False, "--json", help="Emit the profile as JSON."),
    sample: int = typer.Option(5, "--sample", "-n", min=0, help="Values shown per column."),
) -> None:
    """
    Profile a table: constraints, column types, values and numeric statistics.
    """
    profile = _run(lambda viewer: viewer.get_table_information(table))
    if as_json:
        typer.echo(table_information_to_json(profile))
    else:
        render_table_information(profile, sample_size=sample)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
