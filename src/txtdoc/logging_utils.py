#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txtdoc/logging_utils.py
"""Logging setup for the ``txtdoc`` command.

Library code only creates module loggers (``logging.getLogger(__name__)``) and
never installs handlers. The command line entry point calls
:func:`configure_logging` once, which routes every record to standard error
and, optionally, to a log file.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Raises
    ------
    ValueError
        If the name is not a standard logging level

    """
    if isinstance(level, int):
        return level

    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(CONSOLE_FORMAT)


def _reset_handlers(logger: logging.Logger) -> None:
    # Close old handlers too, so repeated calls do not leak open log files
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the console handler, and a file handler if requested.

    Parameters
    ----------
    log_level : int or str
        Level for the root logger and every handler
    log_file : str, optional
        File that receives a copy of every record. If it cannot be opened a
        warning is logged and only the console handler is used.
    trace_mode : bool, default False
        Include timestamps, logger names and line numbers in each record

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    _reset_handlers(root_logger)
    root_logger.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Logging to file: %s", log_file)

    return root_logger


__all__ = ["configure_logging", "resolve_log_level"]
