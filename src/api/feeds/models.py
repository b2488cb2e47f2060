"""
Feed Models - canonical feed episodes and channel info.
"""

from pydantic import BaseModel, Field


class Episode(BaseModel):
    """Canonical episode parsed from an RSS or Atom feed item."""

    title: str | None = Field(default=None, description="Episode title")
    description: str | None = Field(
        default=None, description="Rich content when present, else the plain description"
    )
    pub_date: str | None = Field(default=None, description="Publish date as given by the feed")
    links: list[str] = Field(default_factory=list, description="Episode web links in feed order")
    enclosure_url: str | None = Field(default=None, description="Audio enclosure URL")
    enclosure_length: str | None = Field(default=None, description="Enclosure byte length")
    artwork: str | None = Field(default=None, description="Item artwork, else channel artwork")
    content: str | None = Field(default=None, description="Raw encoded content")
    authors: list[str] = Field(default_factory=list, description="Author names in feed order")
    guid: str = Field(default="", description="Feed guid, else title, else empty")
    duration: str | None = Field(default=None, description="Duration as given by the feed")


class PodcastFeedResult(BaseModel):
    """Result of loading a feed's episodes."""

    episodes: list[Episode] = Field(default_factory=list)
    total_episodes: int = 0
    feed_url: str | None = None
    error: str | None = None
    status_code: int = 200


class PodcastInfo(BaseModel):
    """Channel-level details of a feed."""

    title: str = ""
    description: str = ""
    artwork_url: str | None = None
    author: str = ""
    website: str = ""
    categories: list[str] = Field(default_factory=list)
    explicit: bool = False
    episode_count: int = 0
