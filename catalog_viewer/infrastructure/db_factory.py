"""
Database connection factory utilities for the catalog viewer.

Provides centralized management of Oracle connections and the connection pool
with proper lifecycle management. The PoolManager singleton ensures the pool
is cleaned up on application exit.

Includes retry logic for transient connection failures using tenacity.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import Optional

import oracledb
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from catalog_viewer.config import get_settings
from catalog_viewer.domain.models import DataSourceConfig
from catalog_viewer.exceptions import ConfigurationError
from catalog_viewer.utils.logging import get_logger

log = get_logger(__name__)


class PoolManager:
    """
    Thread-safe singleton for managing the Oracle connection pool.

    Handles lifecycle management with automatic cleanup via atexit hook.
    """

    _instance: Optional["PoolManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "PoolManager":
        """Create or return the singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._pool = None
                cls._instance._source = None
                atexit.register(cls._instance.close_all)
            return cls._instance

    def get_pool(
        self,
        config: Optional[DataSourceConfig] = None,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
    ) -> oracledb.ConnectionPool:
        """
        Get or create the connection pool.

        Sizing only applies when the pool is first created. Once it exists,
        asking for it with a different ``config`` is an error rather than a
        silent reuse of the other database.

        Parameters
        ----------
        config : DataSourceConfig, optional
            Connection descriptor; defaults to the one built from settings.
        min_size : int, optional
            Minimum number of connections kept open.
        max_size : int, optional
            Maximum total connections in the pool.

        Returns
        -------
        oracledb.ConnectionPool
            The managed pool instance.

        Raises
        ------
        ConfigurationError
            If the pool already serves a different data source.
        """
        with self._lock:
            if self._pool is not None:
                if config is not None and config != self._source:
                    raise ConfigurationError(
                        f"pool already open for connection '{self._source.connection_name}'; "
                        f"close it before switching to '{config.connection_name}'"
                    )
                return self._pool
            settings = get_settings()
            source = config or settings.data_source()
            self._pool = oracledb.create_pool(
                user=source.username,
                password=source.password,
                dsn=source.url,
                min=min_size if min_size is not None else settings.db_pool_min,
                max=max_size if max_size is not None else settings.db_pool_max,
                increment=1,
            )
            self._source = source
            return self._pool

    def close_all(self) -> None:
        """
        Close the managed pool and release its connections.

        This is called automatically on exit via atexit hook.
        """
        with self._lock:
            if self._pool is not None:
                try:
                    self._pool.close(force=True)
                except oracledb.Error:
                    pass  # Best-effort cleanup
                finally:
                    self._pool = None
                    self._source = None


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((oracledb.OperationalError, oracledb.InterfaceError)),
    before_sleep=before_sleep_log(log, logging.WARNING),
    reraise=True,
)
def acquire_connection(pool: oracledb.ConnectionPool) -> oracledb.Connection:
    """
    Borrow a connection from the pool with automatic retry.

    Retries up to 3 times with exponential backoff for transient connection
    errors (listener down, network blip while the pool grows). Use the result
    as a context manager so it goes back to the pool.

    Raises
    ------
    oracledb.OperationalError
        If acquisition fails after all retry attempts.
    """
    return pool.acquire()


def get_sync_pool(
    config: Optional[DataSourceConfig] = None,
    min_size: Optional[int] = None,
    max_size: Optional[int] = None,
) -> oracledb.ConnectionPool:
    """Get or create the connection pool via PoolManager."""
    return PoolManager().get_pool(config=config, min_size=min_size, max_size=max_size)


__all__ = [
    "PoolManager",
    "acquire_connection",
    "get_sync_pool",
]
