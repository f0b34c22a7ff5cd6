"""
Query execution seam between catalog logic and the Oracle driver.

The inspector only talks to a ``QueryExecutor``; ``OracleQueryExecutor`` is the
production implementation over an ``oracledb`` connection pool. Tests swap in
an in-memory fake with the same three methods.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, List, Optional, Protocol, Sequence, Type, TypeVar, runtime_checkable

import oracledb

from catalog_viewer.exceptions import IncorrectResultSizeError
from catalog_viewer.infrastructure.db_factory import acquire_connection
from catalog_viewer.utils.logging import get_logger

T = TypeVar("T")
RowMapper = Callable[[Sequence[Any], int], T]

log = get_logger(__name__)


@runtime_checkable
class QueryExecutor(Protocol):
    """Read-only statement runner with positional bind parameters."""

    def query_for_list(self, sql: str, required_type: Type[T], *params: Any) -> List[Optional[T]]:
        """Return the first column of every row, converted to ``required_type``."""
        ...

    def query_for_object(self, sql: str, required_type: Type[T], *params: Any) -> Optional[T]:
        """Return the single scalar of a single-row result."""
        ...

    def query(self, sql: str, row_mapper: RowMapper[T], *params: Any) -> List[T]:
        """Map every row through ``row_mapper(row, row_number)``."""
        ...


def convert_scalar(value: Any, required_type: Type[T]) -> Optional[T]:
    """
    Convert a fetched scalar to the requested type, keeping NULL as None.

    LOBs are read in full, so this must run while their connection is still
    held. Binary data (RAW, BLOB) becomes upper-case hex when text is wanted.
    """
    if isinstance(value, oracledb.LOB):
        value = value.read()
    if value is None or isinstance(value, required_type):
        return value
    if required_type is str and isinstance(value, (bytes, bytearray)):
        return value.hex().upper()  # type: ignore[return-value]
    if required_type is Decimal:
        # str() first so floats keep their shortest repr instead of binary noise
        return Decimal(str(value))  # type: ignore[return-value]
    return required_type(value)  # type: ignore[call-arg]


def _decimal_output_handler(cursor: oracledb.Cursor, metadata: oracledb.FetchInfo) -> Any:
    if metadata.type_code == oracledb.DB_TYPE_NUMBER:
        return cursor.var(Decimal, arraysize=cursor.arraysize)
    return None


class OracleQueryExecutor:
    """
    Run statements on connections borrowed from an ``oracledb`` pool.

    Each call acquires a connection, executes one statement, converts every
    fetched value and only then releases the connection, so one executor can
    be shared between threads.
    """

    def __init__(self, pool: oracledb.ConnectionPool) -> None:
        self._pool = pool

    def _fetch_all(
        self,
        sql: str,
        params: Sequence[Any],
        convert: Callable[[Sequence[Any], int], T],
        as_decimal: bool = False,
    ) -> List[T]:
        log.debug("Executing statement", extra={"sql": sql, "params": list(params)})
        with acquire_connection(self._pool) as conn:
            with conn.cursor() as cur:
                if as_decimal:
                    cur.outputtypehandler = _decimal_output_handler
                cur.execute(sql, list(params))
                return [convert(row, index) for index, row in enumerate(cur.fetchall())]

    def query_for_list(self, sql: str, required_type: Type[T], *params: Any) -> List[Optional[T]]:
        return self._fetch_all(
            sql,
            params,
            lambda row, _: convert_scalar(row[0], required_type),
            as_decimal=required_type is Decimal,
        )

    def query_for_object(self, sql: str, required_type: Type[T], *params: Any) -> Optional[T]:
        values = self._fetch_all(
            sql,
            params,
            lambda row, _: convert_scalar(row[0], required_type),
            as_decimal=required_type is Decimal,
        )
        if len(values) != 1:
            raise IncorrectResultSizeError(expected=1, actual=len(values))
        return values[0]

    def query(self, sql: str, row_mapper: RowMapper[T], *params: Any) -> List[T]:
        return self._fetch_all(sql, params, row_mapper)


__all__ = [
    "QueryExecutor",
    "OracleQueryExecutor",
    "RowMapper",
    "convert_scalar",
]
