from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from catalog_viewer.domain.models import NumericColumn, TableInformation

# Keep the column table readable for long columns
DEFAULT_SAMPLE_SIZE = 5


def _fmt(value: Any) -> str:
    return "NULL" if value is None else str(value)


def _sample(values: Iterable[Any], limit: int) -> str:
    items = list(values)
    shown = ", ".join(_fmt(v) for v in items[:limit])
    if len(items) > limit:
        shown += f", ... (+{len(items) - limit})"
    return shown


def table_information_to_dict(info: TableInformation) -> Dict[str, Any]:
    """
    JSON-ready view of a TableInformation; decimals are kept exact as strings.
    """
    return info.model_dump(mode="json")


def table_information_to_json(info: TableInformation, indent: Optional[int] = 2) -> str:
    return json.dumps(table_information_to_dict(info), indent=indent)


def build_constraints_table(info: TableInformation) -> Table:
    table = Table(title=f"Constraints of {info.table_name}", box=box.SIMPLE_HEAVY)
    table.add_column("Constraint", style="cyan")
    table.add_column("Type")
    table.add_column("Primary", justify="center")
    for pk in info.primary_keys:
        table.add_row(pk.constraint_name, pk.constraint_type, "yes" if pk.is_primary else "")
    return table


def build_columns_table(info: TableInformation, sample_size: int = DEFAULT_SAMPLE_SIZE) -> Table:
    table = Table(
        title=f"Columns of {info.table_name} ({info.column_count})",
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("Column", style="cyan")
    table.add_column("Type")
    table.add_column("Rows", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Median", justify="right")
    table.add_column("Sample")
    for column in info.columns:
        if isinstance(column, NumericColumn) and column.has_statistics:
            stats = (_fmt(column.min), _fmt(column.max), _fmt(column.median))
        else:
            stats = ("", "", "")
        table.add_row(
            column.name,
            column.data_type,
            str(len(column.values)),
            *stats,
            _sample(column.values, sample_size),
        )
    return table


def render_table_information(
    info: TableInformation,
    console: Optional[Console] = None,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> None:
    """Print constraint and column tables for one inspected table."""
    console = console or Console()
    console.print(build_constraints_table(info))
    console.print(build_columns_table(info, sample_size=sample_size))


__all__ = [
    "table_information_to_dict",
    "table_information_to_json",
    "build_constraints_table",
    "build_columns_table",
    "render_table_information",
]
