"""Pytest configuration and shared fixtures for the txtdoc test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Generator

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide the directory holding test input files."""
    return FIXTURES_DIR


@pytest.fixture
def sample_json_path() -> Path:
    """Provide the path of the sample pandoc JSON document."""
    return FIXTURES_DIR / "sample.json"


@pytest.fixture
def sample_json(sample_json_path: Path) -> dict[str, Any]:
    """Provide the decoded sample pandoc JSON document."""
    return json.loads(sample_json_path.read_text(encoding="utf-8"))


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures logging.

    The CLI replaces the root logger's handlers, which would otherwise leak
    into later tests.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no txtdoc environment variables set.

    Returns
    -------
    Path
        The working directory

    """
    for key in list(os.environ):
        if key.startswith("TXTDOC_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return tmp_path
