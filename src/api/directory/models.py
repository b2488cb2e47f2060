"""
Directory Models - provider payload shapes and the canonical podcast record.

Provider records are plain dataclasses built by a total from_dict: a missing or
mistyped field becomes a neutral value instead of an exception, so one odd result
never aborts a whole search.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import Field

from utils.pydantic_tools import BaseModelWithMethods


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1", "explicit")
    return False


# ---------------------------
# Provider A: PodcastIndex
# ---------------------------


@dataclass
class PodcastIndexFeed:
    id: int
    title: str
    url: str
    original_url: str
    link: str
    description: str
    author: str
    owner_name: str
    image: str
    artwork: str
    last_update_time: int
    categories: dict[str, str] = field(default_factory=dict)
    explicit: bool = False
    episode_count: int = 0

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> PodcastIndexFeed:
        raw_categories = d.get("categories")
        categories = (
            {str(k): _as_str(v) for k, v in raw_categories.items()}
            if isinstance(raw_categories, Mapping)
            else {}
        )
        return PodcastIndexFeed(
            id=_as_int(d.get("id")),
            title=_as_str(d.get("title")),
            url=_as_str(d.get("url")),
            original_url=_as_str(d.get("originalUrl")),
            link=_as_str(d.get("link")),
            description=_as_str(d.get("description")),
            author=_as_str(d.get("author")),
            owner_name=_as_str(d.get("ownerName")),
            image=_as_str(d.get("image")),
            artwork=_as_str(d.get("artwork")),
            last_update_time=_as_int(d.get("lastUpdateTime")),
            categories=categories,
            explicit=_as_bool(d.get("explicit")),
            episode_count=_as_int(d.get("episodeCount")),
        )


# ---------------------------
# Provider B: iTunes Search
# ---------------------------


@dataclass
class ITunesPodcast:
    wrapper_type: str
    kind: str
    collection_id: int
    track_id: int
    artist_name: str
    track_name: str
    collection_view_url: str
    feed_url: str
    artwork_url_100: str
    release_date: str
    genres: list[str] = field(default_factory=list)
    collection_explicitness: str = ""
    track_count: int | None = None

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> ITunesPodcast:
        raw_genres = d.get("genres")
        genres = (
            [_as_str(g) for g in raw_genres]
            if isinstance(raw_genres, list)
            else []
        )
        return ITunesPodcast(
            wrapper_type=_as_str(d.get("wrapperType")),
            kind=_as_str(d.get("kind")),
            collection_id=_as_int(d.get("collectionId")),
            track_id=_as_int(d.get("trackId")),
            artist_name=_as_str(d.get("artistName")),
            track_name=_as_str(d.get("trackName")),
            collection_view_url=_as_str(d.get("collectionViewUrl")),
            feed_url=_as_str(d.get("feedUrl")),
            artwork_url_100=_as_str(d.get("artworkUrl100")),
            release_date=_as_str(d.get("releaseDate")),
            genres=genres,
            collection_explicitness=_as_str(d.get("collectionExplicitness")),
            track_count=_as_optional_int(d.get("trackCount")),
        )


# ---------------------------
# Search envelope
# ---------------------------


@dataclass
class PodcastSearchResult:
    """
    Raw directory search body. PodcastIndex fills status/feeds,
    iTunes fills result_count/results.
    """

    status: str | None = None
    result_count: int | None = None
    feeds: list[PodcastIndexFeed] | None = None
    results: list[ITunesPodcast] | None = None

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> PodcastSearchResult:
        feeds_raw = d.get("feeds")
        results_raw = d.get("results")
        return PodcastSearchResult(
            status=_as_str(d["status"]) if d.get("status") is not None else None,
            result_count=_as_optional_int(d.get("resultCount")),
            feeds=(
                [PodcastIndexFeed.from_dict(f) for f in feeds_raw if isinstance(f, Mapping)]
                if isinstance(feeds_raw, list)
                else None
            ),
            results=(
                [ITunesPodcast.from_dict(r) for r in results_raw if isinstance(r, Mapping)]
                if isinstance(results_raw, list)
                else None
            ),
        )


# ---------------------------
# Canonical record
# ---------------------------


class UnifiedPodcast(BaseModelWithMethods):
    """
    Canonical podcast record every consumer reads.
    Every field is always populated; absent source data maps to "", 0, False or {}.
    """

    id: int = Field(default=0, description="Provider podcast id")
    title: str = Field(default="", description="Podcast title")
    url: str = Field(default="", description="Canonical RSS feed URL")
    original_url: str = Field(default="", alias="originalUrl", description="Feed URL before redirects")
    link: str = Field(default="", description="Podcast website URL")
    description: str = Field(default="", description="Podcast description")
    author: str = Field(default="", description="Podcast author")
    owner_name: str = Field(default="", alias="ownerName", description="Feed owner name")
    image: str = Field(default="", description="Podcast image URL")
    artwork: str = Field(default="", description="Podcast artwork URL")
    last_update_time: int = Field(
        default=0, alias="lastUpdateTime", description="Last update (epoch seconds)"
    )
    categories: dict[str, str] = Field(default_factory=dict, description="Category key -> name")
    explicit: bool = Field(default=False, description="Explicit content flag")
    episode_count: int = Field(default=0, alias="episodeCount", description="Number of episodes")
