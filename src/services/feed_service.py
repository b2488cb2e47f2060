"""
Feed Service - loads a podcast's episodes through the backend feed proxy and
publishes them into the AppStore.

Only a fully parsed feed is published. On failure the previous feed results stay
in place and the returned PodcastFeedResult carries the error and a status code.
"""

from adapters.app_state import AppStore
from adapters.config import ClientSettings
from api.feeds.core import FeedIngestor
from api.feeds.models import PodcastFeedResult, PodcastInfo
from utils.errors import ConfigMissingError, ParseFailureError, PodSearchError, TransportFailureError
from utils.get_logger import get_logger

logger = get_logger(__name__)


def status_code_for(error: PodSearchError) -> int:
    """HTTP-style status code reported for a failed feed load."""
    if isinstance(error, TransportFailureError):
        return error.status or 502
    if isinstance(error, ConfigMissingError):
        return 401
    if isinstance(error, ParseFailureError):
        return 400
    return 500


class FeedService:
    def __init__(
        self,
        store: AppStore,
        ingestor: FeedIngestor,
        server_name: str | None,
        api_key: str | None,
    ):
        self.store = store
        self.ingestor = ingestor
        self.server_name = server_name
        self.api_key = api_key

    @classmethod
    def from_settings(cls, store: AppStore, settings: ClientSettings) -> "FeedService":
        ingestor = FeedIngestor(timeout_seconds=settings.request_timeout_seconds)
        return cls(store, ingestor, settings.server_name, settings.api_key)

    async def load_feed(self, feed_url: str) -> PodcastFeedResult:
        """
        Ingest a feed and publish its episodes.

        Args:
            feed_url: Feed URL to load through the backend proxy

        Returns:
            PodcastFeedResult with episodes, or with error/status_code on failure
        """
        self.store.replace(is_loading=True)
        try:
            episodes = await self.ingestor.ingest(self.server_name, self.api_key, feed_url)
        except PodSearchError as e:
            logger.error(f"Failed to load feed {feed_url}: {e}")
            self.store.replace(error_message=str(e))
            return PodcastFeedResult(feed_url=feed_url, error=str(e), status_code=status_code_for(e))
        else:
            result = PodcastFeedResult(
                episodes=episodes,
                total_episodes=len(episodes),
                feed_url=feed_url,
                status_code=200,
            )
            self.store.replace(podcast_feed_results=result, error_message=None)
            return result
        finally:
            self.store.replace(is_loading=False)

    async def load_channel_info(self, feed_url: str) -> PodcastInfo | None:
        """Fetch channel details for a feed. Returns None on failure."""
        try:
            return await self.ingestor.fetch_channel_info(self.server_name, self.api_key, feed_url)
        except PodSearchError as e:
            logger.error(f"Failed to load channel info for {feed_url}: {e}")
            self.store.replace(error_message=str(e))
            return None
