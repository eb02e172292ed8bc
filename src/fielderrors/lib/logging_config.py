"""Logging configuration for fielderrors.

All package loggers live under the ``fielderrors`` namespace so that a single
handler on the package logger controls library and CLI output alike.
"""

import logging
import sys

APP_LOGGER_NAME = "fielderrors"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance for the module
    """
    if name == APP_LOGGER_NAME or name.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger with a single stderr handler.

    Existing handlers on the package logger are removed first, so repeated
    calls (e.g. once per CLI invocation) do not duplicate output.

    Args:
        verbose: Log at DEBUG level
        quiet: Only log errors (ignored when verbose is set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)
    app_logger.propagate = False
