"""
Logging setup for the combat core.

Every module logs through the ``skirmish`` logger using the ``log_*``
helpers, which append an optional context dict as ``key=value`` pairs. The
terminal demo routes the records to a rich handler.
"""

import logging
from typing import Any

from rich.logging import RichHandler

from skirmish.core.utils import console


def setup_logging(level: int = logging.INFO, show_time: bool = True) -> None:
    """
    Sends every record of the package to the shared rich console.

    Args:
        level (int): Minimum level of the emitted records. Defaults to INFO.
        show_time (bool): Whether each record starts with its time.

    """
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
        log_time_format="[%X]",
    )
    logging.basicConfig(level=level, format="%(name)s - %(message)s", handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    """Returns the logger registered under ``name``."""
    return logging.getLogger(name)


logger = get_logger("skirmish")


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    """Appends the context as key=value pairs to the message."""
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} [{pairs}]"


def log_error(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs at ERROR level.

    Args:
        message (str): What went wrong.
        context (dict[str, Any] | None): Values worth recording with it.

    """
    logger.error(_with_context(message, context))


def log_warning(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs at WARNING level, see ``log_error``."""
    logger.warning(_with_context(message, context))


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs at INFO level, see ``log_error``."""
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs at DEBUG level, see ``log_error``."""
    logger.debug(_with_context(message, context))
