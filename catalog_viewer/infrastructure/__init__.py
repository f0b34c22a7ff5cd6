"""
Infrastructure package for the catalog viewer.

Centralizes database connectivity concerns (connection factory, pooling, query
execution). Keep this layer focused on I/O and resource management, decoupled
from catalog inspection logic.
"""

from catalog_viewer.infrastructure.db_factory import (
    PoolManager,
    acquire_connection,
    get_sync_pool,
)
from catalog_viewer.infrastructure.executor import OracleQueryExecutor, QueryExecutor

__all__ = [
    "PoolManager",
    "acquire_connection",
    "get_sync_pool",
    "OracleQueryExecutor",
    "QueryExecutor",
]
