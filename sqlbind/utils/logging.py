"""Logger helpers for SQLBind.

Every logger lives under the ``sqlbind`` namespace. The library never installs
handlers; applications configure the ``sqlbind`` logger like any other.
"""

import logging
from typing import Any, Optional

__all__ = ("get_logger", "log_with_context")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``sqlbind`` namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlbind logger.

    Returns:
        The logger.
    """
    if name is None:
        return logging.getLogger("sqlbind")
    if not name.startswith("sqlbind"):
        name = f"sqlbind.{name}"
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` followed by ``key=value`` pairs.

    The fields are also attached to the record as ``extra_fields`` for handlers
    that emit structured output.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Fields describing the operation
    """
    if not logger.isEnabledFor(level):
        return
    if not extra_fields:
        logger.log(level, message, stacklevel=2)
        return
    context = ", ".join(f"{key}={value!r}" for key, value in sorted(extra_fields.items()))
    logger.log(level, "%s (%s)", message, context, extra={"extra_fields": extra_fields}, stacklevel=2)
