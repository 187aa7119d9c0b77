"""
Database connection factory for the Record Inserter.

Opens one dedicated MySQL connection per insert attempt and guarantees it is
released exactly once. There is no pooling and no retry: a failed connect is
reported straight back to the caller.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Generator, Optional

import mysql.connector
from mysql.connector.abstracts import MySQLConnectionAbstract

from src.domain.errors import DatabaseConnectionError
from src.domain.models import ConnectionConfig
from src.utils.logging import get_logger

log = get_logger(__name__)

Connector = Callable[[ConnectionConfig], MySQLConnectionAbstract]


def build_connect_kwargs(config: ConnectionConfig) -> Dict[str, Any]:
    """
    Translate a ConnectionConfig into `mysql.connector.connect` keyword arguments.

    Autocommit is on so the single INSERT is not wrapped in a transaction.
    """
    return {
        "host": config.host,
        "port": config.port,
        "user": config.user,
        "password": config.password,
        "database": config.database,
        "autocommit": True,
    }


def open_connection(config: ConnectionConfig) -> MySQLConnectionAbstract:
    """
    Open a dedicated MySQL connection.

    Raises
    ------
    DatabaseConnectionError
        If the driver reports any failure while connecting.
    """
    try:
        return mysql.connector.connect(**build_connect_kwargs(config))
    except mysql.connector.Error as exc:
        log.error(
            f"[CONNECT FAILED] {exc}",
            extra={"db_host": config.host, "db_name": config.database, "errno": exc.errno},
        )
        raise DatabaseConnectionError(str(exc)) from exc


def release(resource: Any, kind: str) -> None:
    """
    Close a cursor or connection. Driver errors on close, e.g. from a link
    that already dropped, are logged instead of raised.
    """
    try:
        resource.close()
    except mysql.connector.Error as exc:
        log.warning(f"[CLOSE FAILED] {kind}: {exc}", extra={"errno": exc.errno})


@contextmanager
def connection_scope(
    config: ConnectionConfig, connect: Optional[Connector] = None
) -> Generator[MySQLConnectionAbstract, None, None]:
    """
    Context manager for a connection that is closed on every exit path.

    Example
    -------
        with connection_scope(settings.connection_config()) as conn:
            cur = conn.cursor(prepared=True)
    """
    conn = (connect or open_connection)(config)
    try:
        yield conn
    finally:
        release(conn, "connection")


__all__ = [
    "Connector",
    "build_connect_kwargs",
    "open_connection",
    "connection_scope",
    "release",
]
