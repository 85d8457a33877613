"""Structlog setup for applications embedding localekit.

Importing localekit never touches the logging configuration. Library
modules log through ``get_module_logger()``, whose loggers resolve the
structlog configuration active when they first emit, so whatever the host
application configured applies. Applications without their own setup can
call ``configure_logging()`` once at startup.

Usage:
    from localekit.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings

LIBRARY_LOGGER = "localekit"


def build_processors(production: bool) -> List[Processor]:
    """Processor chain ending in a JSON (production) or console renderer."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over stdlib logging for a host application.

    Args:
        settings: Settings to read LOG_LEVEL and production mode from.
            Defaults to the module-level settings singleton.
        log_level: Override for the log level (DEBUG, INFO, WARNING, ...).
        is_production: Override for production mode (JSON vs console
            output).

    Returns:
        Logger for the "localekit" namespace.
    """
    settings = settings or default_settings
    production = is_production if is_production is not None else settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=build_processors(production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger(LIBRARY_LOGGER).setLevel(level)

    return structlog.stdlib.get_logger(LIBRARY_LOGGER)


def get_module_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a module.

    Binds ``component`` (last module path segment) and ``module_path``.
    Nothing is configured here; the logger follows the host's structlog
    configuration.

    Args:
        name: Module name. Defaults to the calling module.

    Example:
        # In localekit/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "localekit.i18n.translator"}
    """
    if name is None:
        current_frame = inspect.currentframe()
        caller = current_frame.f_back if current_frame is not None else None
        module = inspect.getmodule(caller) if caller is not None else None
        name = module.__name__ if module is not None else None

    if name is None:
        return structlog.stdlib.get_logger(component="unknown")

    # Stays a lazy proxy until the first log call
    return structlog.stdlib.get_logger(
        name,
        component=name.rsplit(".", 1)[-1],
        module_path=name,
    )
