from __future__ import annotations

import platform

from rich.console import Console

from src import reporter
from src.domain.errors import DatabaseConnectionError, ExecutionError, PrepareError
from src.domain.models import InsertOutcome, Record

RECORD = Record(id=9, name="ABCDEF0", surname="ABCDEF0", address="ABCDEF0", city="ABCDEF0", host="h")


def test_version_line_reports_running_interpreter() -> None:
    assert reporter.version_line() == f"Current Python version: {platform.python_version()}"


def test_outcome_lines() -> None:
    assert reporter.outcome_line(InsertOutcome(record=RECORD)) == "New record created successfully"
    assert (
        reporter.outcome_line(InsertOutcome(record=RECORD, error=PrepareError("bad syntax")))
        == "Error preparing statement: bad syntax"
    )
    assert (
        reporter.outcome_line(InsertOutcome(record=RECORD, error=ExecutionError("dup")))
        == "Error: dup"
    )


def test_connection_failure_line() -> None:
    error = DatabaseConnectionError("Access denied for user 'app'")
    assert reporter.connection_failure_line(error) == "Connection failed: Access denied for user 'app'"


def test_render_html_escapes_driver_text() -> None:
    page = reporter.render_html(["Current Python version: 3.12.0", "Error: <b>'x'</b>"])

    assert "<title>Record Inserter</title>" in page
    assert "Current Python version: 3.12.0<br>" in page
    assert "<b>" not in page
    assert "&lt;b&gt;" in page


def test_print_outcome_keeps_brackets_literal() -> None:
    console = Console(record=True, width=200)
    outcome = InsertOutcome(record=RECORD, error=ExecutionError("near '[bold]' at line 1"))

    reporter.print_outcome(outcome, console=console)

    assert "Error: near '[bold]' at line 1" in console.export_text()
