"""
Catalog Viewer - read-only inspection of Oracle data dictionary views.

This package enumerates schemas, tables and columns of an Oracle database and
profiles a single table:

- every constraint defined on it
- each column's declared type and values
- exact min / max / median for numeric columns

The driver layer (``oracledb`` pool, retrying connection factory) is kept
behind a small query-executor seam so the inspection logic can be tested
without a database.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from catalog_viewer.config import Settings, get_settings
from catalog_viewer.domain.models import (
    Column,
    DataSourceConfig,
    NumericColumn,
    PrimaryKey,
    TableInformation,
    TextColumn,
)
from catalog_viewer.exceptions import (
    CatalogViewerError,
    ConfigurationError,
    EmptyDataError,
    IncorrectResultSizeError,
    InvalidIdentifierError,
    QueryError,
)
from catalog_viewer.infrastructure.executor import OracleQueryExecutor, QueryExecutor
from catalog_viewer.inspector import CatalogInspector, DatabaseViewer
from catalog_viewer.stats import ColumnStatistics, median, summarize
from catalog_viewer.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Column",
    "DataSourceConfig",
    "NumericColumn",
    "PrimaryKey",
    "TableInformation",
    "TextColumn",
    # Errors
    "CatalogViewerError",
    "ConfigurationError",
    "EmptyDataError",
    "IncorrectResultSizeError",
    "InvalidIdentifierError",
    "QueryError",
    # Inspection
    "CatalogInspector",
    "DatabaseViewer",
    "OracleQueryExecutor",
    "QueryExecutor",
    # Statistics
    "ColumnStatistics",
    "median",
    "summarize",
    # Logging
    "configure_logging",
    "get_logger",
]
