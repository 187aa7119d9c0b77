"""
Error taxonomy for the insert operation.

Each error keeps the driver's own text in `driver_message`; the driver
exception itself is chained as `__cause__` by the code that raises these.
"""

from __future__ import annotations

from typing import Type

from mysql.connector import errors as mysql_errors


class InserterError(Exception):
    """Base class for failures of the insert operation."""

    def __init__(self, driver_message: str) -> None:
        super().__init__(driver_message)
        self.driver_message = driver_message


class DatabaseConnectionError(InserterError, ConnectionError):
    """The driver could not open a connection. Fatal for the run."""


class PrepareError(InserterError):
    """The INSERT template could not be prepared. Nothing was executed."""


class ExecutionError(InserterError):
    """The database rejected the prepared INSERT."""


def classify_statement_error(exc: mysql_errors.Error) -> Type[InserterError]:
    """
    Map a driver error raised by the prepared cursor to the failing stage.

    The server validates syntax, table and columns while preparing, and those
    failures surface as ProgrammingError. Everything else happens on execute.
    """
    if isinstance(exc, mysql_errors.ProgrammingError):
        return PrepareError
    return ExecutionError


__all__ = [
    "InserterError",
    "DatabaseConnectionError",
    "PrepareError",
    "ExecutionError",
    "classify_statement_error",
]
