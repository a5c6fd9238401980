"""Structlog configuration and logger setup.

The engine runs inside a host application, so logging is configured on the
``modtranslate`` logger hierarchy only. The host's root logger and handlers
are left alone.

Usage:
    from modtranslate.logging import configure_logging, get_module_logger

    # Configure logging when the host loads the engine
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - modtranslate.configuration.Settings
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger

from modtranslate.configuration import settings

PACKAGE_LOGGER = "modtranslate"

# Handlers attached by configure_logging, tagged so reconfiguring replaces them
_HANDLER_ATTR = "_modtranslate_handler"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _install_handler(package_logger: logging.Logger) -> None:
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_ATTR, True)
    package_logger.addHandler(handler)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the engine's loggers.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        The package-level logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if _is_test_environment():
        package_logger.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        return structlog.stdlib.get_logger(PACKAGE_LOGGER)

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    package_logger.setLevel(getattr(logging, effective_log_level.upper(), logging.INFO))
    # keep engine records out of the host's root handlers
    package_logger.propagate = False
    _install_handler(package_logger)

    return structlog.stdlib.get_logger(PACKAGE_LOGGER)


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger named after the calling module.

    Returns:
        Logger under the ``modtranslate`` hierarchy bound with the module's
        short name as ``component``.

    Example:
        # In modtranslate/i18n/store.py
        logger = get_module_logger()
        # logger name "modtranslate.i18n.store", context {"component": "store"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module_name = frame.f_globals.get("__name__") if frame is not None else None
    if not module_name:
        return logger.bind(component="unknown")

    if module_name.split(".", 1)[0] != PACKAGE_LOGGER:
        module_name = f"{PACKAGE_LOGGER}.{module_name}"
    return structlog.stdlib.get_logger(module_name).bind(
        component=module_name.rsplit(".", 1)[-1]
    )
