"""
Directory Result Unifier - maps each provider's search schema onto UnifiedPodcast.

Both conversions are total. Unrecognized or missing fields degrade to neutral
defaults; nothing here raises.
"""

import re
from datetime import datetime

from api.directory.models import (
    ITunesPodcast,
    PodcastIndexFeed,
    PodcastSearchResult,
    UnifiedPodcast,
)
from contracts.models import ITUNES_DESCRIPTION_PLACEHOLDER
from utils.get_logger import get_logger

logger = get_logger(__name__)


RFC3339_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339_timestamp(value: str | None) -> int:
    """
    Parse an RFC 3339 timestamp to epoch seconds.

    Args:
        value: Timestamp string such as "2024-01-05T12:00:00Z"

    Returns:
        Epoch seconds, or 0 when the value is missing, malformed or has no offset
    """
    if not value:
        return 0
    match = RFC3339_PATTERN.match(value.strip())
    if match is None:
        # Basic, week-date and offsetless ISO 8601 forms are not RFC 3339
        logger.debug(f"Not an RFC 3339 release date: {value}")
        return 0
    date_part, time_part, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    fraction = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    try:
        parsed = datetime.fromisoformat(f"{date_part}T{time_part}{fraction}{offset}")
    except ValueError:
        logger.debug(f"Could not parse release date: {value}")
        return 0
    return int(parsed.timestamp())


def explicit_from_itunes(explicitness: str | None) -> bool:
    """'explicit' -> True; 'notExplicit', 'cleaned' and anything else -> False."""
    return explicitness == "explicit"


def unify_podcast_index(feed: PodcastIndexFeed) -> UnifiedPodcast:
    """PodcastIndex already uses the canonical layout: copy field for field."""
    return UnifiedPodcast(
        id=feed.id,
        title=feed.title,
        url=feed.url,
        original_url=feed.original_url,
        link=feed.link,
        description=feed.description,
        author=feed.author,
        owner_name=feed.owner_name,
        image=feed.image,
        artwork=feed.artwork,
        last_update_time=feed.last_update_time,
        categories=dict(feed.categories),
        explicit=feed.explicit,
        episode_count=feed.episode_count,
    )


def unify_itunes(podcast: ITunesPodcast) -> UnifiedPodcast:
    """
    Convert an iTunes search result.

    iTunes has no keyed categories, so genres are keyed by list position.
    It supplies no description, so a fixed placeholder is used.
    """
    categories = {str(index): genre for index, genre in enumerate(podcast.genres)}

    return UnifiedPodcast(
        id=podcast.track_id,
        title=podcast.track_name,
        url=podcast.feed_url,
        original_url=podcast.feed_url,
        link=podcast.collection_view_url,
        description=ITUNES_DESCRIPTION_PLACEHOLDER,
        author=podcast.artist_name,
        owner_name=podcast.artist_name,
        image=podcast.artwork_url_100,
        artwork=podcast.artwork_url_100,
        last_update_time=parse_rfc3339_timestamp(podcast.release_date),
        categories=categories,
        explicit=explicit_from_itunes(podcast.collection_explicitness),
        episode_count=podcast.track_count or 0,
    )


def unify(raw: PodcastIndexFeed | ITunesPodcast) -> UnifiedPodcast:
    """Convert one provider record to the canonical podcast record."""
    if isinstance(raw, ITunesPodcast):
        return unify_itunes(raw)
    return unify_podcast_index(raw)


def unify_search_result(result: PodcastSearchResult) -> list[UnifiedPodcast]:
    """
    Convert a whole search body, keeping provider order.

    A body carrying both lists (never seen in practice) yields PodcastIndex feeds first.
    """
    podcasts = [unify_podcast_index(feed) for feed in result.feeds or []]
    podcasts.extend(unify_itunes(item) for item in result.results or [])
    return podcasts
