"""
Shared fixtures for directory search tests.

Fixtures under fixtures/ are captured search bodies from PodcastIndex and iTunes.
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
def podcastindex_body():
    """Raw PodcastIndex search body."""
    return load_fixture(FIXTURES_DIR, "podcastindex_search.json")


@pytest.fixture
def itunes_body():
    """Raw iTunes search body."""
    return load_fixture(FIXTURES_DIR, "itunes_search.json")


@pytest.fixture
def itunes_body_text():
    """iTunes search body as served over the wire."""
    return load_fixture(FIXTURES_DIR, "itunes_search.json", raw=True)


@pytest.fixture
def search_api_url():
    return "https://search.example.com/api/search"
