"""
Domain package for the catalog viewer.

Exports the records produced by catalog inspection. Keep this package focused
on data definitions and validation concerns.
"""

from catalog_viewer.domain.models import (
    Column,
    DataSourceConfig,
    NumericColumn,
    PrimaryKey,
    TableInformation,
    TextColumn,
)

__all__ = [
    "Column",
    "DataSourceConfig",
    "NumericColumn",
    "PrimaryKey",
    "TableInformation",
    "TextColumn",
]
