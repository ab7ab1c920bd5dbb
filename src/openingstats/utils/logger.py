"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import sys
import time
from functools import wraps

_DEFAULT_LOGGER_NAME = "openingstats"
_DEFAULT_LOG_LEVEL = logging.INFO
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
# stdout carries the JSON report, so log records go to stderr.
_DEFAULT_HANDLER = logging.StreamHandler(sys.stderr)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configure a logger so that all package output flows through one handler.

    The package logger (``openingstats``) receives the shared stderr handler and a
    level. Child loggers (``openingstats.<module>``) are left at ``NOTSET`` and
    propagate to it, so a single ``set_level`` call controls the whole package.
    Loggers outside the package are treated like the package logger.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from openingstats.utils.logger import _configure_logger
    >>> logger = logging.getLogger("openingstats")
    >>> _configure_logger(logger, logging.INFO)
    """
    if logger.name.startswith(f"{_DEFAULT_LOGGER_NAME}."):
        _configure_logger(logging.getLogger(_DEFAULT_LOGGER_NAME), level)
        return
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: str | None = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a configured logger for the given name."""
    logger = logging.getLogger(name or _DEFAULT_LOGGER_NAME)
    _configure_logger(logger, level)
    return logger


def set_level(level: int | str, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more logger names."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    names = logger_names or [_DEFAULT_LOGGER_NAME, "urllib3"]
    for name in names:
        logging.getLogger(name).setLevel(level)


def funclogger(func):
    """Decorator to add debug tracing to functions:

    Logs the function path and its arguments.
    Logs the start and end of the function execution.
    Logs the return value.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        function_path = f"{func.__module__}.{func.__qualname__}".replace("<", "").replace(">", "")
        logger = get_logger(function_path)
        if not logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)

        for i, arg in enumerate(args):
            logger.debug(" %s. %s (%s)", i, arg, type(arg).__name__)
        for key, value in kwargs.items():
            logger.debug(" - %s (%s): %s", key, type(value).__name__, value)

        logger.debug("Starting %s", func.__qualname__)
        start_time = time.time()
        result = func(*args, **kwargs)
        elapsed_time = time.time() - start_time
        logger.debug("Finished %s in %.4f seconds", func.__qualname__, elapsed_time)
        logger.debug("Return Value: %s (%s)", result, type(result).__name__)
        return result

    return wrapper
