"""
Backend Models - episode records as the first-party server sends them,
plus the request/response bodies of the data endpoints.

The six episode records are unrelated shapes. They share field names on the wire
but no domain base class; EpisodeHandle gives the uniform view over them.
"""

from pydantic import Field

from utils.pydantic_tools import BaseModelWithMethods

# ---------------------------
# Episode records
# ---------------------------


class FreshFeedEpisode(BaseModelWithMethods):
    """Recently published episode from a subscribed podcast."""

    podcast_name: str = Field(default="", alias="PodcastName")
    episode_id: int = Field(alias="EpisodeID")
    episode_title: str = Field(alias="EpisodeTitle")
    episode_pub_date: str = Field(default="", alias="EpisodePubDate")
    episode_description: str = Field(default="", alias="EpisodeDescription")
    episode_artwork: str = Field(default="", alias="EpisodeArtwork")
    episode_url: str = Field(default="", alias="EpisodeURL")
    episode_duration: int = Field(default=0, alias="EpisodeDuration")
    listen_duration: int | None = Field(default=None, alias="ListenDuration")


class QueuedEpisode(BaseModelWithMethods):
    """Episode in the user's play queue."""

    podcast_name: str = Field(default="", alias="PodcastName")
    episode_id: int = Field(alias="EpisodeID")
    episode_title: str = Field(alias="EpisodeTitle")
    episode_pub_date: str = Field(default="", alias="EpisodePubDate")
    episode_description: str = Field(default="", alias="EpisodeDescription")
    episode_artwork: str = Field(default="", alias="EpisodeArtwork")
    episode_url: str = Field(default="", alias="EpisodeURL")
    episode_duration: int = Field(default=0, alias="EpisodeDuration")
    queue_position: int = Field(default=0, alias="QueuePosition")
    queue_date: str = Field(default="", alias="QueueDate")


class SavedEpisode(BaseModelWithMethods):
    """Episode the user saved."""

    podcast_name: str = Field(default="", alias="PodcastName")
    episode_id: int = Field(alias="EpisodeID")
    episode_title: str = Field(alias="EpisodeTitle")
    episode_pub_date: str = Field(default="", alias="EpisodePubDate")
    episode_description: str = Field(default="", alias="EpisodeDescription")
    episode_artwork: str = Field(default="", alias="EpisodeArtwork")
    episode_url: str = Field(default="", alias="EpisodeURL")
    episode_duration: int = Field(default=0, alias="EpisodeDuration")
    save_date: str = Field(default="", alias="SaveDate")
    website_url: str = Field(default="", alias="WebsiteURL")


class HistoryEpisode(BaseModelWithMethods):
    """Episode from the user's listen history."""

    podcast_name: str = Field(default="", alias="PodcastName")
    episode_id: int = Field(alias="EpisodeID")
    episode_title: str = Field(alias="EpisodeTitle")
    episode_pub_date: str = Field(default="", alias="EpisodePubDate")
    episode_description: str = Field(default="", alias="EpisodeDescription")
    episode_artwork: str = Field(default="", alias="EpisodeArtwork")
    episode_url: str = Field(default="", alias="EpisodeURL")
    episode_duration: int = Field(default=0, alias="EpisodeDuration")
    listen_date: str = Field(default="", alias="ListenDate")
    listen_duration: int | None = Field(default=None, alias="ListenDuration")


class DownloadedEpisode(BaseModelWithMethods):
    """Episode downloaded to the server."""

    podcast_id: int = Field(default=0, alias="PodcastID")
    podcast_name: str = Field(default="", alias="PodcastName")
    episode_id: int = Field(alias="EpisodeID")
    episode_title: str = Field(alias="EpisodeTitle")
    episode_pub_date: str = Field(default="", alias="EpisodePubDate")
    episode_description: str = Field(default="", alias="EpisodeDescription")
    episode_artwork: str = Field(default="", alias="EpisodeArtwork")
    episode_url: str = Field(default="", alias="EpisodeURL")
    episode_duration: int = Field(default=0, alias="EpisodeDuration")
    download_id: int = Field(default=0, alias="DownloadID")
    downloaded_location: str = Field(default="", alias="DownloadedLocation")


class SearchResultEpisode(BaseModelWithMethods):
    """Episode row returned by the database search endpoint."""

    podcast_id: int = Field(alias="PodcastID")
    podcast_name: str = Field(alias="PodcastName")
    artwork_url: str = Field(alias="ArtworkURL")
    author: str = Field(alias="Author")
    categories: str = Field(alias="Categories")
    description: str = Field(alias="Description")
    episode_count: int = Field(alias="EpisodeCount")
    feed_url: str = Field(alias="FeedURL")
    website_url: str = Field(alias="WebsiteURL")
    explicit: int = Field(alias="Explicit", description="0 or 1")
    user_id: int = Field(alias="UserID")
    episode_id: int = Field(alias="EpisodeID")
    episode_title: str = Field(alias="EpisodeTitle")
    episode_description: str = Field(alias="EpisodeDescription")
    episode_url: str = Field(alias="EpisodeURL")
    episode_artwork: str = Field(alias="EpisodeArtwork")
    episode_pub_date: str = Field(alias="EpisodePubDate")
    episode_duration: int = Field(alias="EpisodeDuration")
    listen_duration: int | None = Field(default=None, alias="ListenDuration")


# ---------------------------
# Request / response bodies
# ---------------------------


class SearchRequest(BaseModelWithMethods):
    """Database search submission."""

    search_term: str
    user_id: int


class SearchResponse(BaseModelWithMethods):
    """Database search results, in server order."""

    data: list[SearchResultEpisode] = Field(default_factory=list)


class QueuePodcastRequest(BaseModelWithMethods):
    episode_title: str
    ep_url: str
    user_id: int


class SavePodcastRequest(BaseModelWithMethods):
    episode_title: str
    ep_url: str
    user_id: int


class DownloadEpisodeRequest(BaseModelWithMethods):
    episode_id: int
    user_id: int
