"""
Core insert operation: connect, generate a record, prepare, execute, close.

Usage:
    from src.config import get_settings
    from src.inserter import run

    outcome = run(get_settings().connection_config())
    print(outcome.status)

A connection failure raises DatabaseConnectionError and never produces an
outcome. Prepare and execute failures are returned inside the outcome, and the
connection is closed before `run` returns.
"""

from __future__ import annotations

from typing import Callable, Optional

import mysql.connector

from src.domain.errors import InserterError, PrepareError, classify_statement_error
from src.domain.generator import generate_record
from src.domain.models import COLUMNS, TABLE_NAME, ConnectionConfig, InsertOutcome, Record
from src.infrastructure.db_factory import Connector, connection_scope, release
from src.utils.logging import get_logger

log = get_logger(__name__)

INSERT_SQL = (
    f"INSERT INTO {TABLE_NAME} ({', '.join(COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in COLUMNS)})"
)


class RecordInserter:
    """
    Insert one synthetic record per `run()` call.

    The connector, record factory and SQL text are injectable so the
    prepare and execute paths can be exercised without a server.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        connect: Optional[Connector] = None,
        record_factory: Callable[[], Record] = generate_record,
        sql: str = INSERT_SQL,
    ) -> None:
        self.config = config
        self._connect = connect
        self._record_factory = record_factory
        self.sql = sql

    def run(self) -> InsertOutcome:
        """
        Execute the insert attempt and return its outcome.

        Raises
        ------
        DatabaseConnectionError
            If the connection cannot be opened. Nothing else is attempted.
        """
        with connection_scope(self.config, connect=self._connect) as conn:
            record = self._record_factory()
            log.info(
                f"[INSERT START] {TABLE_NAME}",
                extra={"record_id": record.id, "record_host": record.host},
            )
            try:
                self._insert(conn, record)
            except InserterError as exc:
                log.warning(
                    f"[INSERT FAILED] {type(exc).__name__}: {exc.driver_message}",
                    extra={"record_id": record.id, "error_type": type(exc).__name__},
                )
                return InsertOutcome(record=record, error=exc)

        log.info(f"[INSERT SUCCESS] {TABLE_NAME}", extra={"record_id": record.id})
        return InsertOutcome(record=record)

    def _insert(self, conn, record: Record) -> None:
        try:
            cursor = conn.cursor(prepared=True)
        except mysql.connector.Error as exc:
            raise PrepareError(str(exc)) from exc

        try:
            cursor.execute(self.sql, record.as_row())
        except mysql.connector.Error as exc:
            error_cls = classify_statement_error(exc)
            raise error_cls(str(exc)) from exc
        finally:
            release(cursor, "cursor")


def run(config: ConnectionConfig, connect: Optional[Connector] = None) -> InsertOutcome:
    """Insert one record using a fresh connection built from `config`."""
    return RecordInserter(config, connect=connect).run()


__all__ = ["INSERT_SQL", "RecordInserter", "run"]
