"""
Domain package for the Record Inserter.

Exports the record model, the outcome type, the error taxonomy, and the
synthetic record generator. Keep this package free of I/O.
"""

from src.domain.errors import (
    DatabaseConnectionError,
    ExecutionError,
    InserterError,
    PrepareError,
)
from src.domain.generator import generate_record, generate_token
from src.domain.models import ConnectionConfig, InsertOutcome, OutcomeStatus, Record

__all__ = [
    "ConnectionConfig",
    "DatabaseConnectionError",
    "ExecutionError",
    "InsertOutcome",
    "InserterError",
    "OutcomeStatus",
    "PrepareError",
    "Record",
    "generate_record",
    "generate_token",
]
