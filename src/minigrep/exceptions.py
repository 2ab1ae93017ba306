#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the minigrep package.

This module defines the exception classes raised while resolving the
execution configuration, reading the target file, and writing matches.
Every error is raised by the component that detects it and reported by
the command-line entry point, which chooses the exit code.

Exception Hierarchy
-------------------
- MinigrepError (base exception)

  - ConfigError (argument and configuration problems)
    - MissingArgumentsError (fewer than two positional arguments)
    - ConfigFileError (unreadable or malformed config file)

  - FileError (file access and I/O)
    - FileReadError (the target file could not be loaded)
      - FileNotFoundError (file doesn't exist)
      - FileAccessError (permissions, directories, other OS errors)
      - MalformedFileError (content is not valid text)

  - OutputWriteError (writing matches failed)

"""


class MinigrepError(Exception):
    """Base exception class for all minigrep-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigError(MinigrepError):
    """Exception raised when the execution configuration cannot be built."""


class MissingArgumentsError(ConfigError):
    """Exception raised when the query or filename argument is missing.

    Parameters
    ----------
    received : int
        Number of arguments received, program name included
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, received: int, message: str | None = None):
        """Initialize the missing arguments error."""
        if message is None:
            message = "Some arguments appear to be missing"
        super().__init__(message)
        self.received = received


class ConfigFileError(ConfigError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path to the offending configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config file error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class FileError(MinigrepError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileReadError(FileError):
    """Exception raised when the file to search cannot be loaded into memory."""


class FileNotFoundError(FileReadError):
    """Exception raised when the file to search does not exist.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileReadError):
    """Exception raised when a file exists but cannot be read.

    This includes permission errors, directories given as files, etc.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be accessed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileReadError):
    """Exception raised when file content cannot be decoded as text."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(MinigrepError):
    """Exception raised when matching lines cannot be written to the output stream."""


__all__ = [
    "MinigrepError",
    "ConfigError",
    "MissingArgumentsError",
    "ConfigFileError",
    "FileError",
    "FileReadError",
    "FileNotFoundError",
    "FileAccessError",
    "MalformedFileError",
    "OutputWriteError",
]
