"""Cross-cutting helpers: logging setup and logger lookup."""

from src.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
