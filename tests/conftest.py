"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add parent directory to path so imports work
# This allows: from enums import ... to find /project/enums.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import setup_logging
from terminal import FixedTerminal


# Configure logging once for entire test session
@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests.

    Runs once before any tests (scope="session", autouse=True).
    """
    setup_logging(verbose=False)
    yield


@pytest.fixture
def terminal_80() -> FixedTerminal:
    """An 80x24 terminal."""
    return FixedTerminal(columns=80, lines=24)


@pytest.fixture
def terminal_large() -> FixedTerminal:
    """A 160x50 terminal (big enough for dialogs)."""
    return FixedTerminal(columns=160, lines=50)


@pytest.fixture
def sample_pairs() -> list[tuple[str, str]]:
    """Property/value pairs with a blank row and a skipped row."""
    return [
        ("name", "Alice"),
        ("age", "30"),
        (" ", ""),
        ("", "never shown"),
        ("city", "Berlin"),
    ]


@pytest.fixture
def long_text() -> str:
    """A sentence long enough to need wrapping in narrow columns."""
    return "the quick brown fox jumps over the lazy dog and keeps on running"
