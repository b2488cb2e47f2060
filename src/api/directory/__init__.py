"""
Directory Search Package - PodcastIndex and iTunes directory search.

This package provides:
- DirectoryClient: connectivity probe and search against the directory endpoint
- Models: provider payload shapes and the canonical UnifiedPodcast
- Unifier: total conversions from each provider schema to UnifiedPodcast
"""

from api.directory.core import DirectoryClient
from api.directory.models import (
    ITunesPodcast,
    PodcastIndexFeed,
    PodcastSearchResult,
    UnifiedPodcast,
)
from api.directory.unify import unify, unify_search_result

__all__ = [
    # Client
    "DirectoryClient",
    # Models
    "ITunesPodcast",
    "PodcastIndexFeed",
    "PodcastSearchResult",
    "UnifiedPodcast",
    # Unifier
    "unify",
    "unify_search_result",
]
