"""
Catalog inspection for Oracle databases.

``CatalogInspector`` lists schemas, tables and columns from the data
dictionary views and assembles a ``TableInformation`` profile for one table.

Usage:
    from catalog_viewer.infrastructure import OracleQueryExecutor, get_sync_pool
    from catalog_viewer.inspector import CatalogInspector

    inspector = CatalogInspector(OracleQueryExecutor(get_sync_pool()))
    info = inspector.get_table_information("EMPLOYEES")

Performance note: ``get_table_information`` issues ``2 + 2N`` statements for a
table with N columns, and each value statement reads the entire column. Wide
or large tables are correspondingly expensive to profile.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Protocol, Sequence, runtime_checkable

from catalog_viewer import queries
from catalog_viewer.domain.models import (
    NumericColumn,
    PrimaryKey,
    TableInformation,
    TextColumn,
)
from catalog_viewer.exceptions import InvalidIdentifierError, QueryError
from catalog_viewer.infrastructure.executor import QueryExecutor
from catalog_viewer.stats import summarize
from catalog_viewer.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class DatabaseViewer(Protocol):
    """Read-only view over a database catalog."""

    def get_schemas(self) -> List[str]:
        ...

    def get_tables(self) -> List[str]:
        ...

    def get_columns(self, table_name: str) -> List[str]:
        ...

    def get_table_information(self, table_name: str) -> TableInformation:
        ...


def map_primary_key(row: Sequence[Any], row_number: int) -> PrimaryKey:
    """Map an ALL_CONSTRAINTS (name, type) row."""
    return PrimaryKey(constraint_name=row[0], constraint_type=row[1])


def _require_table_name(table_name: str) -> str:
    if not table_name or not table_name.strip():
        raise InvalidIdentifierError("table name must be a non-empty identifier")
    return table_name


class CatalogInspector(DatabaseViewer):
    """
    Database viewer for Oracle catalog views.

    Holds no state besides the executor; every call builds fresh result
    objects, so concurrent use is safe whenever the executor is.
    """

    def __init__(self, executor: QueryExecutor) -> None:
        self._executor = executor

    def get_schemas(self) -> List[str]:
        log.info("Get schemas started")
        return self._executor.query_for_list(queries.LIST_SCHEMAS, str)

    def get_tables(self) -> List[str]:
        log.info("Get tables started")
        return self._executor.query_for_list(queries.LIST_TABLES, str)

    def get_columns(self, table_name: str) -> List[str]:
        """Column names of ``table_name`` in catalog order."""
        log.info("Get columns started", extra={"table": table_name})
        return self._executor.query_for_list(
            queries.LIST_COLUMNS, str, _require_table_name(table_name)
        )

    def get_table_information(self, table_name: str) -> TableInformation:
        """
        Profile one table: its constraints, and every column's type and values.

        ``primary_keys`` on the result holds every constraint of the table;
        filter on ``constraint_type`` (or use ``primary_key_constraints``) for
        actual primary keys.

        Raises
        ------
        InvalidIdentifierError
            If ``table_name`` is empty or cannot be quoted.
        IncorrectResultSizeError
            If a column's declared type lookup does not return exactly one row.
        oracledb.Error
            On any driver failure; no partial result is returned.
        """
        log.info("Get table information started", extra={"table": table_name})
        _require_table_name(table_name)
        primary_keys = self._executor.query(queries.LIST_CONSTRAINTS, map_primary_key, table_name)
        column_names = self.get_columns(table_name)
        # Names returned by the catalog for this exact table are the only ones
        # ever spliced into the value statements.
        columns = [self._build_column(table_name, name) for name in column_names]

        return TableInformation(
            table_name=table_name,
            column_count=len(column_names),
            columns=tuple(columns),
            primary_keys=tuple(primary_keys),
        )

    def _build_column(self, table_name: str, column_name: str):
        data_type = self._executor.query_for_object(
            queries.COLUMN_DATA_TYPE, str, table_name, column_name
        )
        if data_type is None:
            raise QueryError(f"no declared type for {table_name}.{column_name}")
        sql = queries.column_values_sql(table_name, column_name)

        if queries.is_numeric_type(data_type):
            values: List[Decimal] = self._executor.query_for_list(sql, Decimal)
            stats = summarize(values)
            if stats is None:
                log.warning(
                    "Numeric column has no finite values; statistics left unset",
                    extra={"table": table_name, "column": column_name},
                )
                return NumericColumn(name=column_name, data_type=data_type, values=tuple(values))
            return NumericColumn(
                name=column_name,
                data_type=data_type,
                values=tuple(values),
                min=stats.min,
                max=stats.max,
                median=stats.median,
            )

        text_values: List[str] = self._executor.query_for_list(sql, str)
        return TextColumn(name=column_name, data_type=data_type, values=tuple(text_values))


__all__ = ["DatabaseViewer", "CatalogInspector", "map_primary_key"]
