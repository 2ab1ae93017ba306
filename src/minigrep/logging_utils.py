"""Logging setup for the minigrep command.

Diagnostics from every ``minigrep.*`` logger end up on stderr, so matched
lines on stdout stay clean enough to pipe. A log file can receive a copy.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str | None, default: int = logging.WARNING) -> int:
    """Turn a level name or number into a numeric logging level.

    Names are matched case-insensitively with surrounding whitespace
    ignored, and digit strings such as ``"10"`` are read as numbers.
    Anything else resolves to ``default``.
    """
    if log_level is None:
        return default
    if isinstance(log_level, int):
        return log_level

    name = str(log_level).strip().upper()
    if name.isdigit():
        return int(name)

    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else default


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Point the root logger at stderr (and optionally a file) for one run.

    Any handlers left by an earlier call are dropped first, so calling this
    twice never duplicates output.

    Parameters
    ----------
    log_level : int | str
        Threshold as a number or a name like ``"debug"``.
    log_file : str, optional
        File that receives a copy of every record. If it cannot be opened the
        run continues with stderr only and a warning is logged.
    trace_mode : bool, default False
        Prefix each record with a timestamp and the logger name.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    if not log_file:
        return root_logger

    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        root_logger.warning("Could not open log file %s, logging to stderr only: %s", log_file, exc)
        return root_logger

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    root_logger.debug("Copying log records to %s", log_file)
    return root_logger
