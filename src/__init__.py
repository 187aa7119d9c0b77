"""
Record Inserter - writes one synthetic record to MySQL per invocation.

This package connects to MySQL with credentials taken from the environment,
generates a synthetic record, and inserts it through a prepared statement:

- Settings loaded once from environment variables
- A dedicated connection released on every exit path
- A typed outcome rendered by the CLI or by the web page

Connection failures stop the run; prepare and execute failures are reported.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from src.config import Settings, get_settings
from src.domain import (
    ConnectionConfig,
    DatabaseConnectionError,
    ExecutionError,
    InsertOutcome,
    InserterError,
    OutcomeStatus,
    PrepareError,
    Record,
    generate_record,
)
from src.inserter import INSERT_SQL, RecordInserter, run
from src.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Core operation
    "INSERT_SQL",
    "RecordInserter",
    "run",
    # Domain
    "ConnectionConfig",
    "InsertOutcome",
    "OutcomeStatus",
    "Record",
    "generate_record",
    # Errors
    "InserterError",
    "DatabaseConnectionError",
    "PrepareError",
    "ExecutionError",
    # Logging
    "configure_logging",
    "get_logger",
]
