"""
Domain models for the Record Inserter.

Defines the connection parameters, the synthetic record written to the `dados`
table, and the outcome returned by a single insert attempt.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from src.domain.errors import ExecutionError, InserterError, PrepareError

TABLE_NAME = "dados"
COLUMNS: Tuple[str, ...] = ("AlunoID", "Nome", "Sobrenome", "Endereco", "Cidade", "Host")


class ConnectionConfig(BaseModel):
    """
    Raw MySQL connection parameters. Values are not validated here; empty
    strings reach the driver as-is.
    """

    host: str
    user: str
    password: str = Field(..., repr=False)
    database: str
    port: int = 3306

    model_config = {"frozen": True}


class Record(BaseModel):
    """
    Representation of a single row in the `dados` table.
    """

    id: int = Field(..., alias="AlunoID", ge=1, le=999, description="Random id, not unique.")
    name: str = Field(..., alias="Nome")
    surname: str = Field(..., alias="Sobrenome")
    address: str = Field(..., alias="Endereco")
    city: str = Field(..., alias="Cidade")
    host: str = Field(..., alias="Host", description="Host name of the inserting machine.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    def as_row(self) -> Tuple[int, str, str, str, str, str]:
        """Values in `COLUMNS` order, ready to bind."""
        return (self.id, self.name, self.surname, self.address, self.city, self.host)


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    PREPARE_ERROR = "prepare_error"
    EXECUTION_ERROR = "execution_error"


@dataclass(frozen=True)
class InsertOutcome:
    """
    Result of one insert attempt that got past the connect step.
    """

    record: Record
    error: Optional[InserterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> OutcomeStatus:
        if self.error is None:
            return OutcomeStatus.SUCCESS
        if isinstance(self.error, PrepareError):
            return OutcomeStatus.PREPARE_ERROR
        if isinstance(self.error, ExecutionError):
            return OutcomeStatus.EXECUTION_ERROR
        raise TypeError(f"Unexpected outcome error type: {type(self.error).__name__}")


__all__ = [
    "TABLE_NAME",
    "COLUMNS",
    "ConnectionConfig",
    "Record",
    "OutcomeStatus",
    "InsertOutcome",
]
