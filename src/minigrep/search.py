#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line filtering for minigrep.

Matching is a literal substring test applied line by line. Results keep
the original line text and file order.

A line ends only at ``\\n``; one ``\\r`` directly before it is dropped.
Every other control or separator character (form feed, a lone ``\\r``,
U+2028, ...) stays part of the line it appears in.
"""

from __future__ import annotations

from typing import Iterator

Line = str


def iter_lines(contents: str) -> Iterator[Line]:
    """Yield the lines of ``contents``.

    The final line need not be terminated, and a trailing ``\\n`` does not
    produce an extra empty line.

    Examples
    --------
    >>> list(iter_lines("one\\r\\ntwo\\x0cstill two\\nthree\\r"))
    ['one', 'two\\x0cstill two', 'three\\r']

    """
    start = 0
    length = len(contents)

    while start < length:
        end = contents.find("\n", start)
        if end == -1:
            yield contents[start:]
            return
        if end > start and contents[end - 1] == "\r":
            yield contents[start : end - 1]
        else:
            yield contents[start:end]
        start = end + 1


def iter_matching_lines(query: str, contents: str, case_sensitive: bool = True) -> Iterator[Line]:
    """Yield the lines of ``contents`` that contain ``query``.

    Parameters
    ----------
    query : str
        Literal text to look for. An empty query matches every line.
    contents : str
        Full text to search, split with :func:`iter_lines`.
    case_sensitive : bool, default True
        When False, both the query and each line are lowercased before the
        containment test. The yielded line is always the original text.

    Yields
    ------
    str
        Matching lines in file order

    """
    needle = query if case_sensitive else query.lower()

    for line in iter_lines(contents):
        haystack = line if case_sensitive else line.lower()
        if needle in haystack:
            yield line


def search(query: str, contents: str, case_sensitive: bool = True) -> list[Line]:
    """Return every line of ``contents`` containing ``query``.

    Examples
    --------
    >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.")
    ['safe, fast, productive.']
    >>> search("rUsT", "Rust:\\nTrust me.", case_sensitive=False)
    ['Rust:', 'Trust me.']

    """
    return list(iter_matching_lines(query, contents, case_sensitive))


def search_case_insensitive(query: str, contents: str) -> list[Line]:
    """Return every line of ``contents`` containing ``query``, ignoring case."""
    return search(query, contents, case_sensitive=False)


__all__ = ["Line", "iter_lines", "iter_matching_lines", "search", "search_case_insensitive"]
