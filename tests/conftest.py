"""
Test Configuration - Shared test fixtures and setup

This module provides common test fixtures and configuration for the test suite.
"""

import logging
import pytest
from typing import Any, Dict, List

# Import test modules
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ash_helpers.config import reset_config_manager


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Give every test a fresh configuration read from a known environment."""
    for name in ("ENVIRONMENT", "APP_TIMEZONE", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def nested_collection() -> Dict[str, Any]:
    """Nested mapping mixing dicts, lists and leaf values."""
    return {
        "name": "report",
        "meta": {"author": "sam", "tags": ["a", "b"]},
        "items": [{"id": 1, "price": 9.5}, {"id": 2, "price": 3.0}],
    }


@pytest.fixture
def sample_texts() -> List[str]:
    """Assorted text inputs for string helpers."""
    return [
        "",
        "Hello, World!",
        "  spaced  ",
        "Already-slugged",
        "-dash-",
        "Ünïcode Text",
        "multiple   spaces & symbols!!",
        "tabs\tand\nnewlines",
    ]


@pytest.fixture
def make_file(tmp_path):
    """Create a file of a given size and return its path."""

    def _make(size: int, name: str = "data.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(b"x" * size)
        return path

    return _make
