"""Structured logging infrastructure.

Centralized logging configuration and utilities using structlog.

Public API:
    - configure_logging(): Initialize logging for the engine's loggers
    - get_module_logger(): Get a logger for the calling module
    - bind_mod_context(): Context manager for mod-scoped logging
"""

from modtranslate.logging.context import bind_mod_context
from modtranslate.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_mod_context",
]
