"""
Feeds Package - RSS/Atom ingestion through the backend feed proxy.

This package provides:
- FeedIngestor: fetches a feed via the backend and parses it
- Parser: document-to-Episode conversion with the artwork/guid/description fallbacks
- Models: Episode, PodcastFeedResult, PodcastInfo
"""

from api.feeds.core import FeedIngestor
from api.feeds.models import Episode, PodcastFeedResult, PodcastInfo
from api.feeds.rss_parser import parse_channel_info, parse_feed_episodes

__all__ = [
    "FeedIngestor",
    "Episode",
    "PodcastFeedResult",
    "PodcastInfo",
    "parse_channel_info",
    "parse_feed_episodes",
]
