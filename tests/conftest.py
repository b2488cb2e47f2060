"""
Shared fixtures for service-level tests.
"""

# Set environment to test mode FIRST, before any imports
import os

import pytest

from adapters.app_state import AppState, AppStore
from api.directory.models import UnifiedPodcast
from api.server.models import SearchResponse, SearchResultEpisode


def pytest_configure(config):
    """Pytest hook to configure test environment before any tests run."""
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture
def search_api_url():
    return "https://search.example.com/api/search"


@pytest.fixture
def server_name():
    return "https://pods.example.com"


@pytest.fixture
def api_key():
    return "test_api_key_12345"


@pytest.fixture
def store():
    return AppStore()


@pytest.fixture
def previous_podcasts():
    """Results left over from an earlier search."""
    return [UnifiedPodcast(id=1, title="Earlier Result", url="https://feeds.example.com/earlier")]


def make_search_episode(episode_id: int, **overrides) -> SearchResultEpisode:
    fields = {
        "PodcastID": 12,
        "PodcastName": "Startup Stories",
        "ArtworkURL": "https://cdn.example.com/startup/artwork.jpg",
        "Author": "Jane Founder",
        "Categories": "",
        "Description": "Founders tell the story of their first year.",
        "EpisodeCount": 142,
        "FeedURL": "https://feeds.example.com/startup-stories.xml",
        "WebsiteURL": "https://startupstories.example.com",
        "Explicit": 0,
        "UserID": 2,
        "EpisodeID": episode_id,
        "EpisodeTitle": f"Episode {episode_id}",
        "EpisodeDescription": "Short description.",
        "EpisodeURL": f"https://cdn.example.com/startup/{episode_id}.mp3",
        "EpisodeArtwork": f"https://cdn.example.com/startup/{episode_id}.jpg",
        "EpisodePubDate": "2024-01-05",
        "EpisodeDuration": 2537,
    }
    fields.update(overrides)
    return SearchResultEpisode.model_validate(fields)


@pytest.fixture
def episode_factory():
    """Build SearchResultEpisode records by id."""
    return make_search_episode


@pytest.fixture
def search_episode():
    return make_search_episode(4411)


@pytest.fixture
def previous_store(previous_podcasts, search_episode):
    """A store that already holds results from earlier searches."""
    return AppStore(
        AppState(
            search_results=previous_podcasts,
            search_episodes=SearchResponse(data=[search_episode]),
        )
    )
