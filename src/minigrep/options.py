#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Execution configuration for a single minigrep run.

The configuration is resolved once at the process boundary from the raw
argument vector and an environment mapping, then handed to the runner.
Nothing deeper in the package reads the environment.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Sequence

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from minigrep.constants import CASE_INSENSITIVE_ENV_VAR, MIN_ARGUMENTS
from minigrep.exceptions import MissingArgumentsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ExecutionConfig(CloneFrozenMixin):
    """Immutable settings for one search invocation.

    Parameters
    ----------
    query : str
        Literal text to look for
    filename : str
        Path of the file to search
    case_sensitive : bool, default True
        Whether matching compares text verbatim. False lowercases both the
        query and each line before comparing.

    """

    query: str = field(metadata={"help": "Literal text to search for", "importance": "core"})
    filename: str = field(metadata={"help": "Path of the file to search", "importance": "core"})
    case_sensitive: bool = field(
        default=True,
        metadata={
            "help": f"Match case exactly. Disabled when {CASE_INSENSITIVE_ENV_VAR} is set",
            "importance": "core",
        },
    )

    @classmethod
    def build(cls, args: Sequence[str], environ: Mapping[str, str] | None = None) -> ExecutionConfig:
        """Resolve a configuration from the process arguments and environment.

        Parameters
        ----------
        args : Sequence[str]
            Full argument vector, program name first
        environ : Mapping[str, str], optional
            Environment to consult, defaults to ``os.environ``. Only the
            presence of ``CASE_INSENSITIVE`` matters; its value is ignored.

        Returns
        -------
        ExecutionConfig
            The resolved configuration

        Raises
        ------
        MissingArgumentsError
            If the query or filename argument is missing

        """
        if len(args) < MIN_ARGUMENTS:
            raise MissingArgumentsError(received=len(args))

        if environ is None:
            environ = os.environ

        query = str(args[1])
        filename = str(args[2])
        case_sensitive = CASE_INSENSITIVE_ENV_VAR not in environ

        return cls(query=query, filename=filename, case_sensitive=case_sensitive)


__all__ = ["CloneFrozenMixin", "ExecutionConfig"]
