"""
Server Package - first-party backend records and data endpoints.

This package provides:
- ServerClient: database search and queue/save/download actions
- EpisodeHandle: uniform view over the six backend episode records
- Models: episode records and request/response bodies
"""

from api.server.core import ServerClient
from api.server.episodes import EpisodeHandle, EpisodeRecord, wrap_episodes
from api.server.models import (
    DownloadedEpisode,
    DownloadEpisodeRequest,
    FreshFeedEpisode,
    HistoryEpisode,
    QueuedEpisode,
    QueuePodcastRequest,
    SavedEpisode,
    SavePodcastRequest,
    SearchRequest,
    SearchResponse,
    SearchResultEpisode,
)

__all__ = [
    # Client
    "ServerClient",
    # Handle
    "EpisodeHandle",
    "EpisodeRecord",
    "wrap_episodes",
    # Records
    "DownloadedEpisode",
    "FreshFeedEpisode",
    "HistoryEpisode",
    "QueuedEpisode",
    "SavedEpisode",
    "SearchResultEpisode",
    # Bodies
    "DownloadEpisodeRequest",
    "QueuePodcastRequest",
    "SavePodcastRequest",
    "SearchRequest",
    "SearchResponse",
]
