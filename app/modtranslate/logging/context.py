"""Per-mod context binding for structured logging.

Usage:
    from modtranslate.logging import bind_mod_context

    with bind_mod_context(mod_id="Author.Mod", operation="reload"):
        # All logs within this block will include the context
        logger.info("reloading_translations")

Dependencies:
    - structlog.contextvars
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_mod_context(
    mod_id: str,
    mod_name: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind mod-scoped context to all logs within the context manager.

    Args:
        mod_id: Unique ID of the mod owning the work being logged.
        mod_name: Display name of the mod (if available).
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"mod_id": mod_id}

    if mod_name is not None:
        context["mod_name"] = mod_name

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
