"""Project-wide custom exceptions for the catalog viewer."""

from __future__ import annotations


class CatalogViewerError(Exception):
    """Base exception for the catalog viewer."""


class ConfigurationError(CatalogViewerError):
    """Raised when connection settings are missing or unusable."""


class QueryError(CatalogViewerError):
    """Raised when a catalog query cannot produce the expected result."""


class IncorrectResultSizeError(QueryError):
    """Raised when a single-row lookup returns zero rows or more than one."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Incorrect result size: expected {expected}, actual {actual}")


class InvalidIdentifierError(CatalogViewerError, ValueError):
    """Raised when a table or column name cannot be safely used in a statement."""


class EmptyDataError(CatalogViewerError, ValueError):
    """Raised when a statistic is requested over no values."""


__all__ = [
    "CatalogViewerError",
    "ConfigurationError",
    "QueryError",
    "IncorrectResultSizeError",
    "InvalidIdentifierError",
    "EmptyDataError",
]
