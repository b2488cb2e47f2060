"""
Shared fixtures for feed ingestion tests.
"""

# Set environment to test mode FIRST, before any imports
import os
from pathlib import Path

import pytest

from utils.pytest_utils import load_fixture


def pytest_configure(config):
    """Pytest hook to configure test environment before any tests run."""
    os.environ["ENVIRONMENT"] = "test"


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def feed_document():
    """Load a feed document from fixtures/ by name."""

    def _load(filename: str) -> str:
        return load_fixture(FIXTURES_DIR, filename, raw=True)

    return _load


@pytest.fixture
def server_name():
    return "https://pods.example.com"


@pytest.fixture
def api_key():
    return "test_api_key_12345"
