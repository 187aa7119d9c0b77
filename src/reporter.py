from __future__ import annotations

import platform
from typing import List, Optional

from markupsafe import escape
from rich.console import Console

from src.domain.errors import DatabaseConnectionError, ExecutionError, PrepareError
from src.domain.models import InsertOutcome

SUCCESS_LINE = "New record created successfully"
PAGE_TITLE = "Record Inserter"


def version_line() -> str:
    return f"Current Python version: {platform.python_version()}"


def outcome_line(outcome: InsertOutcome) -> str:
    """
    Single human-readable line describing the outcome.
    """
    error = outcome.error
    if error is None:
        return SUCCESS_LINE
    if isinstance(error, PrepareError):
        return f"Error preparing statement: {error.driver_message}"
    if isinstance(error, ExecutionError):
        return f"Error: {error.driver_message}"
    raise TypeError(f"Unexpected outcome error type: {type(error).__name__}")


def connection_failure_line(error: DatabaseConnectionError) -> str:
    return f"Connection failed: {error.driver_message}"


def render_html(lines: List[str]) -> str:
    """
    Wrap output lines in the minimal page served by the web adapter.

    Lines are HTML-escaped since they may carry driver text.
    """
    body = "<br>\n".join(str(escape(line)) for line in lines)
    return (
        "<html>\n"
        "<head>\n"
        f"<title>{PAGE_TITLE}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def print_outcome(outcome: InsertOutcome, console: Optional[Console] = None) -> None:
    """
    Print the outcome line to the terminal, green on success and red otherwise.
    """
    console = console or Console()
    style = "green" if outcome.ok else "bold red"
    console.print(outcome_line(outcome), style=style, markup=False, highlight=False)


def print_connection_failure(
    error: DatabaseConnectionError, console: Optional[Console] = None
) -> None:
    console = console or Console()
    console.print(connection_failure_line(error), style="bold red", markup=False, highlight=False)


__all__ = [
    "SUCCESS_LINE",
    "version_line",
    "outcome_line",
    "connection_failure_line",
    "render_html",
    "print_outcome",
    "print_connection_failure",
]
