"""Pytest configuration and shared fixtures for the minigrep test suite."""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import POEM, SAMPLE_CONTENTS, cleanup_test_dir, create_test_temp_dir, write_text_file

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)

    import os

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo handler and level changes made by ``configure_logging``."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        yield
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files."""
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch) -> Path:
    """Run from an empty directory with an empty home so no config file is discovered."""
    workdir = tmp_path / "work"
    home = tmp_path / "home"
    workdir.mkdir()
    home.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    for name in ("MINIGREP_CONFIG", "MINIGREP_LOG_LEVEL", "MINIGREP_LOG_FILE", "MINIGREP_TRACE", "CASE_INSENSITIVE"):
        monkeypatch.delenv(name, raising=False)
    return workdir


@pytest.fixture
def sample_file(temp_dir) -> Path:
    """Provide a file holding the three-line sample used across search tests."""
    return write_text_file(temp_dir, "sample.txt", SAMPLE_CONTENTS)


@pytest.fixture
def poem_file(temp_dir) -> Path:
    """Provide a file holding a short poem."""
    return write_text_file(temp_dir, "poem.txt", POEM)
