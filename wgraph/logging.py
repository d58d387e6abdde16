"""Package-wide logging for wgraph.

All modules obtain loggers through :func:`get_logger`, which hangs them under
the single ``wgraph`` root logger. The root logger owns the only handler, so
changing its level (``set_global_log_level``) affects every module at once.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "wgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``wgraph`` root logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Level for the root logger.
        format_string: Formatter pattern; ``DEFAULT_FORMAT`` when omitted.
        handler: Handler to install; a stdout ``StreamHandler`` when omitted.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Propagate so pytest's caplog sees records.
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the root ``wgraph`` configuration.

    Args:
        name: Logger name, normally ``__name__``.

    Returns:
        The logger, left at ``NOTSET`` so the root level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the root logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch the whole package back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler so the next call reconfigures (used by tests)."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@contextmanager
def log_duration(
    logger: logging.Logger, label: str, level: int = logging.INFO
) -> Iterator[None]:
    """Log how long the wrapped block took.

    Example:
        with log_duration(logger, "graph creation"):
            graph = builder.build()
    """
    start = perf_counter()
    try:
        yield
    finally:
        logger.log(level, "%s took %.3f s", label, perf_counter() - start)


setup_root_logger()
