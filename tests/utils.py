"""Test utilities for the minigrep test suite."""

import shutil
import tempfile
from pathlib import Path

SAMPLE_CONTENTS = (
    "This is a string\n"
    "It contains a line that says Testing which should be found by the program\n"
    "It also contains another LINE that does not contain the above term that should not be found"
)

SAMPLE_LINES = SAMPLE_CONTENTS.split("\n")

POEM = """I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_text_file(directory: Path, name: str, contents: str, encoding: str = "utf-8") -> Path:
    """Write ``contents`` to ``directory / name`` and return the path."""
    path = directory / name
    path.write_bytes(contents.encode(encoding))
    return path
