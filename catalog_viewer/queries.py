"""
Oracle catalog query templates and identifier handling.

The templates use Oracle positional binds (``:1``, ``:2``). Only the
column-values statement needs identifiers spliced in, and those always go
through ``quote_identifier``.
"""

from __future__ import annotations

from catalog_viewer.exceptions import InvalidIdentifierError

LIST_SCHEMAS = "SELECT USERNAME AS SCHEMA_NAME FROM SYS.DBA_USERS"
LIST_TABLES = "SELECT TABLE_NAME FROM ALL_TABLES"
LIST_COLUMNS = "SELECT COLUMN_NAME FROM USER_TAB_COLS WHERE TABLE_NAME = :1"
LIST_CONSTRAINTS = (
    "SELECT CONSTRAINT_NAME, CONSTRAINT_TYPE FROM ALL_CONSTRAINTS WHERE TABLE_NAME = :1"
)
COLUMN_DATA_TYPE = "SELECT DATA_TYPE FROM USER_TAB_COLS WHERE table_name = :1 AND COLUMN_NAME = :2"

NUMERIC_TYPE_MARKERS = (
    "NUMBER",
    "FLOAT",
    "BINARY_FLOAT",
    "BINARY_DOUBLE",
    "DECIMAL",
    "INTEGER",
)


def is_numeric_type(data_type: str) -> bool:
    """Whether a USER_TAB_COLS.DATA_TYPE value belongs to the numeric family."""
    upper = data_type.upper()
    return any(marker in upper for marker in NUMERIC_TYPE_MARKERS)


def quote_identifier(name: str) -> str:
    """
    Double-quote an Oracle identifier exactly as stored in the catalog.

    Oracle has no escape for ``"`` inside a quoted identifier, so such names
    (and empty or NUL-bearing ones) are rejected outright.
    """
    if not name or not name.strip():
        raise InvalidIdentifierError("identifier must be a non-empty name")
    if '"' in name or "\x00" in name:
        raise InvalidIdentifierError(f"identifier {name!r} cannot be quoted safely")
    return f'"{name}"'


def column_values_sql(table_name: str, column_name: str) -> str:
    """Build ``SELECT "<column>" FROM "<table>"`` with both names quoted."""
    return f"SELECT {quote_identifier(column_name)} FROM {quote_identifier(table_name)}"


__all__ = [
    "LIST_SCHEMAS",
    "LIST_TABLES",
    "LIST_COLUMNS",
    "LIST_CONSTRAINTS",
    "COLUMN_DATA_TYPE",
    "NUMERIC_TYPE_MARKERS",
    "is_numeric_type",
    "quote_identifier",
    "column_values_sql",
]
