"""Structured logging for localekit using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
"""

from localekit.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
