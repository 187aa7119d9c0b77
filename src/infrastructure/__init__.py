"""
Infrastructure package for the Record Inserter.

Centralizes database connectivity (connection factory and scoped release).
Keep this layer focused on I/O and resource management, decoupled from
record generation and reporting.
"""

from src.infrastructure.db_factory import (
    build_connect_kwargs,
    connection_scope,
    open_connection,
)

__all__ = [
    "build_connect_kwargs",
    "connection_scope",
    "open_connection",
]
