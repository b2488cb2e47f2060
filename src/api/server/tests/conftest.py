"""
Shared fixtures for backend server tests.
"""

# Set environment to test mode FIRST, before any imports
import os
from pathlib import Path

import pytest

from api.server.models import (
    DownloadedEpisode,
    FreshFeedEpisode,
    HistoryEpisode,
    QueuedEpisode,
    SavedEpisode,
    SearchResultEpisode,
)
from utils.pytest_utils import load_fixture


def pytest_configure(config):
    """Pytest hook to configure test environment before any tests run."""
    os.environ["ENVIRONMENT"] = "test"


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def search_data_body():
    """Raw /api/data/search_data response."""
    return load_fixture(FIXTURES_DIR, "search_data.json")


@pytest.fixture
def search_result_episode(search_data_body):
    return SearchResultEpisode.model_validate(search_data_body["data"][0])


@pytest.fixture
def common_episode_fields():
    """Wire fields every backend episode record carries."""
    return {
        "PodcastName": "Startup Stories",
        "EpisodeID": 4411,
        "EpisodeTitle": "Episode 3: Shipping",
        "EpisodePubDate": "2024-01-05T12:00:00",
        "EpisodeDescription": "Rich notes on shipping.",
        "EpisodeArtwork": "https://cdn.example.com/startup/ep3.jpg",
        "EpisodeURL": "https://cdn.example.com/startup/ep3.mp3",
        "EpisodeDuration": 2537,
    }


@pytest.fixture
def episode_records(common_episode_fields, search_result_episode):
    """One record of each backend shape, all describing the same episode."""
    return {
        "fresh": FreshFeedEpisode.model_validate(common_episode_fields),
        "queued": QueuedEpisode.model_validate({**common_episode_fields, "QueuePosition": 1}),
        "saved": SavedEpisode.model_validate(
            {**common_episode_fields, "SaveDate": "2024-01-06T08:00:00"}
        ),
        "history": HistoryEpisode.model_validate(
            {**common_episode_fields, "ListenDate": "2024-01-07", "ListenDuration": 120}
        ),
        "downloaded": DownloadedEpisode.model_validate(
            {**common_episode_fields, "DownloadedLocation": "/downloads/ep3.mp3"}
        ),
        "search_result": search_result_episode,
    }


@pytest.fixture
def server_name():
    return "https://pods.example.com"


@pytest.fixture
def api_key():
    return "test_api_key_12345"
