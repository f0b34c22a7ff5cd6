"""
Pytest configuration for the catalog viewer.

Provides fixtures for:
- An in-memory, call-counting query executor standing in for Oracle
- Settings isolated from the developer's environment
- Live-database settings for integration tests
"""

from __future__ import annotations

import os
from decimal import Decimal

import pytest

from catalog_viewer.config import Settings, get_settings
from tests.fakes import FakeCatalogExecutor


@pytest.fixture
def employees_executor() -> FakeCatalogExecutor:
    """A three-column table with one numeric, one text and one float column."""
    return FakeCatalogExecutor(
        columns={
            "ID": ("NUMBER", [3, 1, 2]),
            "NAME": ("VARCHAR2", ["Ann", "Bob", None]),
            "SALARY": ("BINARY_DOUBLE", [Decimal("100.50"), Decimal("99.25"), None]),
        },
        constraints=[("EMP_PK", "P"), ("EMP_NAME_NN", "C")],
        schemas=["HR", "SYS"],
        tables=["EMPLOYEES", "DEPARTMENTS"],
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Drop DB_*/LOG_* variables, any local .env and the settings cache."""
    for key in list(os.environ):
        if key.startswith(("DB_", "LOG_")):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings for integration tests, overridable via environment variables.
    """
    return Settings(
        DB_URL=os.getenv("DB_URL", "localhost:1521/FREEPDB1"),
        DB_USER=os.getenv("DB_USER", "system"),
        DB_PASSWORD=os.getenv("DB_PASSWORD", "oracle"),
        LOG_LEVEL="DEBUG",
    )
