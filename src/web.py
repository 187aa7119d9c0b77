"""
Web page for the Record Inserter.

Every request to the page performs one insert and renders the result as a
minimal HTML document, the same way the page did when it was served by Apache.

Usage:
    from src.web import create_app

    app = create_app()
    app.run(host="0.0.0.0", port=5000)
"""

from __future__ import annotations

from typing import Callable, Optional

from flask import Flask, Response, jsonify

from src.config import Settings, get_settings
from src.domain.errors import DatabaseConnectionError
from src.domain.models import ConnectionConfig, InsertOutcome
from src.inserter import run
from src.reporter import connection_failure_line, outcome_line, render_html, version_line
from src.utils.logging import get_logger

log = get_logger(__name__)

PAGE_CONTENT_TYPE = "text/html; charset=iso-8859-1"

InsertRunner = Callable[[ConnectionConfig], InsertOutcome]


def create_app(
    settings: Optional[Settings] = None, runner: Optional[InsertRunner] = None
) -> Flask:
    """
    Build the Flask app. `runner` defaults to `src.inserter.run`.
    """
    settings = settings or get_settings()
    config = settings.connection_config()
    insert = runner or run

    app = Flask(__name__)

    def page() -> Response:
        lines = [version_line()]
        status = 200
        try:
            outcome = insert(config)
        except DatabaseConnectionError as exc:
            lines.append(connection_failure_line(exc))
            status = 500
        else:
            lines.append(outcome_line(outcome))
        return Response(
            render_html(lines).encode("iso-8859-1", errors="replace"),
            status=status,
            content_type=PAGE_CONTENT_TYPE,
        )

    app.add_url_rule("/", "index", page)
    app.add_url_rule("/index.php", "index_php", page)

    @app.get("/health")
    def health():
        return jsonify(ok=True)

    log.info(
        "Web app created",
        extra={"db_host": settings.db_host, "db_name": settings.db_name, "env": settings.app_env},
    )
    return app


__all__ = ["create_app"]
