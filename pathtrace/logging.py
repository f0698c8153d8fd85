"""Logging for pathtrace.

Every module logs through a child of the ``pathtrace`` logger obtained with
``get_logger(__name__)``. What ends up there:

    - DEBUG: search start (mode, endpoints, node count) and outcome (cost,
      step and settled counts, or exhaustion) from ``algorithms.search``;
      scenario construction from ``scenario``.
    - INFO: CLI progress such as the scenario or preset being loaded, the
      number of steps produced and where results were written.
    - WARNING: edges dropped from the adjacency because their road type has no
      multiplier, and ``inspect`` finding edges that break A* admissibility.
    - ERROR: the one-line reason before the CLI exits with status 1.

The CLI maps ``--verbose`` to DEBUG and ``--quiet`` to WARNING; INFO is the
default. Records go to stdout and also propagate, so pytest's ``caplog`` sees
them.
"""

import logging
import sys
from typing import Optional

_ROOT_LOGGER_NAME = "pathtrace"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the pathtrace logger has its handler; cleared by reset_logging()
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Give the ``pathtrace`` logger its single handler.

    Runs on import with the defaults. Later calls do nothing until
    ``reset_logging()``; tests use that pair to swap in a handler that writes
    to a buffer.

    Args:
        level: Threshold for the ``pathtrace`` logger (default: INFO).
        format_string: Record format; defaults to time, logger name, level
            and message.
        handler: Destination; defaults to a StreamHandler on stdout, next to
            the CLI's report output.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a pathtrace module.

    The logger is left at NOTSET, so the threshold chosen by the CLI flags on
    the ``pathtrace`` logger applies to it.

    Args:
        name: Usually the caller's ``__name__``, e.g. ``pathtrace.cli``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the threshold for every pathtrace logger and its handler.

    Args:
        level: Logging level, e.g. ``logging.DEBUG`` to see search traces.
    """
    setup_root_logger()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-search DEBUG records (same as the CLI's ``--verbose``)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the default INFO threshold."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the handler and clear the threshold so setup can run again."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
