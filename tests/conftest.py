"""
Pytest configuration for the Record Inserter.

Provides fixtures for:
- Settings isolated from the host environment
- Database connection management for integration tests
- The `dados` table schema and cleanup
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import mysql.connector
import pytest

from src.config import Settings, get_settings
from src.domain.models import ConnectionConfig

APP_ENV_VARS = (
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "WEB_HOST",
    "WEB_PORT",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove app variables and run from a directory without a `.env` file."""
    for name in APP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(
        host="db.internal",
        user="app",
        password="s3cret",
        database="meubanco",
    )


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "127.0.0.1"),
        db_port=int(os.getenv("DB_PORT", "3306")),
        db_user=os.getenv("DB_USER", "app"),
        db_password=os.getenv("DB_PASSWORD", "app"),
        db_name=os.getenv("DB_NAME", "meubanco"),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def db_connection_available(test_settings: Settings) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when MySQL is not available.
    """
    try:
        conn = mysql.connector.connect(
            host=test_settings.db_host,
            port=test_settings.db_port,
            user=test_settings.db_user,
            password=test_settings.db_password,
            database=test_settings.db_name,
            connection_timeout=5,
        )
    except mysql.connector.Error:
        return False
    conn.close()
    return True


@pytest.fixture(scope="session")
def db_connection(test_settings: Settings, db_connection_available: bool):
    """
    Provide a session-scoped database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = mysql.connector.connect(
        host=test_settings.db_host,
        port=test_settings.db_port,
        user=test_settings.db_user,
        password=test_settings.db_password,
        database=test_settings.db_name,
        autocommit=True,
    )
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="session")
def db_schema_initialized(db_connection) -> bool:
    """
    Ensure the `dados` table exists, creating it from db/init.sql if needed.
    """
    init_sql_path = Path(__file__).parent.parent / "db" / "init.sql"
    cur = db_connection.cursor()
    try:
        cur.execute(init_sql_path.read_text(encoding="utf-8"))
    finally:
        cur.close()
    return True


@pytest.fixture
def clean_dados_table(db_connection, db_schema_initialized: bool):
    """
    Empty the `dados` table before and after each test function.
    """
    cur = db_connection.cursor()
    try:
        cur.execute("DELETE FROM dados")
        yield
        cur.execute("DELETE FROM dados")
    finally:
        cur.close()
