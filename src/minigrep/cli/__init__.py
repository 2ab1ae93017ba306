#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for minigrep.

Prints every line of a file that contains a query string.

Examples
--------
Case-sensitive search::

    $ minigrep to poem.txt
    Searching for to
    In file poem.txt
    Are you nobody, too?
    How dreary to be somebody!

Case-insensitive search (any value, even empty, enables it)::

    $ CASE_INSENSITIVE=1 minigrep to poem.txt

Debug logging to stderr::

    $ MINIGREP_LOG_LEVEL=DEBUG minigrep to poem.txt

Exit codes: 0 on success (including no matches), 1 on any error.
"""

import logging
import os
import sys
from typing import Mapping, Sequence

from minigrep.cli.config import load_config_with_priority, resolve_logging_settings
from minigrep.constants import CONFIG_ENV_VAR, DEFAULT_LOG_LEVEL, EXIT_ERROR, EXIT_SUCCESS
from minigrep.exceptions import ConfigError, ConfigFileError, MinigrepError
from minigrep.logging_utils import configure_logging, resolve_log_level
from minigrep.options import ExecutionConfig
from minigrep.runner import run, write_lines

logger = logging.getLogger(__name__)

__all__ = ["main"]


def _setup_logging(environ: Mapping[str, str]) -> None:
    """Configure logging from the environment and any configuration file.

    Raises
    ------
    ConfigFileError
        If a configuration file is named or discovered but cannot be loaded

    """
    config_data = load_config_with_priority(env_var_path=environ.get(CONFIG_ENV_VAR))
    settings = resolve_logging_settings(config_data, environ)

    level = resolve_log_level(settings["log_level"], default=-1)
    configure_logging(
        level if level >= 0 else DEFAULT_LOG_LEVEL, log_file=settings["log_file"], trace_mode=settings["trace"]
    )

    if level < 0:
        logger.warning("Unknown log level %r, using %s", settings["log_level"], DEFAULT_LOG_LEVEL)


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Execute the minigrep command-line entry point.

    Arguments are checked before any configuration file is read, so a
    missing query or filename is reported even when the file is broken.

    Parameters
    ----------
    argv : Sequence[str], optional
        Full argument vector, program name first. Defaults to ``sys.argv``.
    environ : Mapping[str, str], optional
        Environment to consult. Defaults to ``os.environ``.

    Returns
    -------
    int
        Process exit code

    """
    if argv is None:
        argv = sys.argv
    if environ is None:
        environ = os.environ

    try:
        config = ExecutionConfig.build(argv, environ)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _setup_logging(environ)
    except ConfigFileError as e:
        print(f"Problem loading configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug(
        "Resolved configuration: query=%r filename=%r case_sensitive=%s",
        config.query,
        config.filename,
        config.case_sensitive,
    )

    try:
        write_lines([f"Searching for {config.query}", f"In file {config.filename}"])
        run(config)
    except MinigrepError as e:
        logger.debug("Search failed", exc_info=True)
        print(f"Application error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
