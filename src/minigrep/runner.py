#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run a resolved search: load the file, filter it, and write the matches."""

from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from minigrep.constants import TEXT_ENCODING
from minigrep.exceptions import FileAccessError, MalformedFileError, OutputWriteError
from minigrep.exceptions import FileNotFoundError as MinigrepFileNotFoundError
from minigrep.options import ExecutionConfig
from minigrep.search import search

logger = logging.getLogger(__name__)


def read_contents(filename: str) -> str:
    """Load the whole file at ``filename`` as UTF-8 text.

    Parameters
    ----------
    filename : str
        Path of the file to read

    Returns
    -------
    str
        Full file contents

    Raises
    ------
    FileNotFoundError
        If nothing exists at ``filename`` (the minigrep exception, not the builtin)
    FileAccessError
        If the path is a directory, is not readable, or another OS error occurs
    MalformedFileError
        If the bytes are not valid UTF-8

    """
    try:
        # newline="" keeps \r bytes so line splitting sees the original text
        with open(filename, "r", encoding=TEXT_ENCODING, newline="") as handle:
            contents = handle.read()
    except FileNotFoundError as e:
        raise MinigrepFileNotFoundError(file_path=filename, original_error=e) from e
    except PermissionError as e:
        raise FileAccessError(filename, message=f"Permission denied: {filename}", original_error=e) from e
    except IsADirectoryError as e:
        raise FileAccessError(filename, message=f"Is a directory: {filename}", original_error=e) from e
    except UnicodeDecodeError as e:
        raise MalformedFileError(
            f"File is not valid {TEXT_ENCODING} text: {filename} (byte {e.start})",
            file_path=filename,
            original_error=e,
        ) from e
    except OSError as e:
        raise FileAccessError(filename, message=f"Cannot read file {filename}: {e}", original_error=e) from e

    logger.debug("Read %d characters from %s", len(contents), filename)
    return contents


def write_lines(lines: Iterable[str], stream: TextIO | None = None) -> int:
    """Write each of ``lines`` followed by a newline, then flush.

    Parameters
    ----------
    lines : Iterable[str]
        Text to write, one entry per output line
    stream : TextIO, optional
        Destination, defaults to ``sys.stdout``

    Returns
    -------
    int
        Number of lines written

    Raises
    ------
    OutputWriteError
        If the stream rejects a write or cannot encode a line

    """
    out = stream if stream is not None else sys.stdout
    count = 0

    try:
        for line in lines:
            out.write(line + "\n")
            count += 1
        out.flush()
    except UnicodeEncodeError as e:
        raise OutputWriteError(
            f"Cannot encode output as {e.encoding}: {e.object[e.start : e.end]!r}", original_error=e
        ) from e
    except OSError as e:
        raise OutputWriteError(f"Failed to write results: {e}", original_error=e) from e

    return count


def run(config: ExecutionConfig, stream: TextIO | None = None) -> int:
    """Search the configured file and write each matching line.

    Parameters
    ----------
    config : ExecutionConfig
        Resolved execution configuration
    stream : TextIO, optional
        Destination for matching lines, defaults to ``sys.stdout``

    Returns
    -------
    int
        Number of lines written. Zero matches is not an error.

    Raises
    ------
    FileReadError
        If the file cannot be loaded
    OutputWriteError
        If writing to ``stream`` fails

    """
    contents = read_contents(config.filename)
    results = search(config.query, contents, config.case_sensitive)
    logger.debug("Found %d matching line(s) in %s", len(results), config.filename)

    return write_lines(results, stream)


__all__ = ["read_contents", "run", "write_lines"]
