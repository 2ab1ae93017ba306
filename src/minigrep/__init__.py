#  Copyright (c) 2025 Tom Villani, Ph.D.
r"""minigrep: print the lines of a file that contain a query string.

Library usage
-------------
    >>> from minigrep import search
    >>> search("body", "I'm nobody! Who are you?\nAre you nobody, too?\nThen there's a pair of us")
    ["I'm nobody! Who are you?", 'Are you nobody, too?']

Command-line usage
------------------
    $ minigrep body poem.txt
    $ CASE_INSENSITIVE=1 minigrep BODY poem.txt

"""

from minigrep.exceptions import (
    ConfigError,
    FileReadError,
    MinigrepError,
    MissingArgumentsError,
    OutputWriteError,
)
from minigrep.options import ExecutionConfig
from minigrep.runner import read_contents, run
from minigrep.search import Line, iter_matching_lines, search, search_case_insensitive

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ExecutionConfig",
    "FileReadError",
    "Line",
    "MinigrepError",
    "MissingArgumentsError",
    "OutputWriteError",
    "iter_matching_lines",
    "read_contents",
    "run",
    "search",
    "search_case_insensitive",
]
