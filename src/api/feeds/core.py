"""
Feed Ingestor - loads feeds through the backend's feed proxy.

Feed URLs are never fetched directly. The backend retrieves the document and this
client parses it; a parse failure aborts the whole ingestion.
"""

from adapters.config import require_server
from api.feeds.models import Episode, PodcastInfo
from api.feeds.rss_parser import parse_channel_info, parse_feed_episodes
from utils.base_api_client import BaseAPIClient
from utils.errors import FetchFailedError, TransportFailureError
from utils.get_logger import get_logger

logger = get_logger(__name__)

FEED_PROXY_PATH = "/api/data/fetch_podcast_feed"


class FeedIngestor(BaseAPIClient):
    """Fetches feed documents via the backend proxy and parses them."""

    _rate_limit_endpoint = "server"
    _rate_limit_max = 10
    _rate_limit_period = 1.0

    def __init__(self, timeout_seconds: float = 10):
        self.timeout_seconds = timeout_seconds

    async def _fetch_feed_document(
        self, server_name: str | None, api_key: str | None, feed_url: str
    ) -> bytes:
        server_name, api_key = require_server(server_name, api_key)

        url = f"{server_name.rstrip('/')}{FEED_PROXY_PATH}"
        headers = {"Content-Type": "application/json", "Api-Key": api_key}

        try:
            return await self._core_async_request(
                "GET", url, params={"podcast_feed": feed_url}, headers=headers, read="bytes"
            )
        except TransportFailureError as e:
            logger.error(f"Failed to fetch podcast feed {feed_url}: {e.status_text}")
            raise FetchFailedError(
                f"Failed to fetch podcast feed: {e.status_text}", status=e.status
            ) from e

    async def ingest(
        self, server_name: str | None, api_key: str | None, feed_url: str
    ) -> list[Episode]:
        """
        Fetch a feed through the backend proxy and parse its episodes.

        Args:
            server_name: Backend base URL
            api_key: Backend API key, sent as the Api-Key header
            feed_url: Feed URL to retrieve

        Returns:
            Episodes in document order

        Raises:
            ConfigMissingError: If the API key or server is missing (before any request)
            FetchFailedError: If the proxy returns non-2xx or the request fails
            FeedParseFailedError: If the body is not a parseable RSS/Atom document
        """
        body = await self._fetch_feed_document(server_name, api_key, feed_url)
        episodes = parse_feed_episodes(body)
        logger.info(f"Ingested {len(episodes)} episodes from {feed_url}")
        return episodes

    async def fetch_channel_info(
        self, server_name: str | None, api_key: str | None, feed_url: str
    ) -> PodcastInfo:
        """Fetch a feed through the backend proxy and parse its channel details."""
        body = await self._fetch_feed_document(server_name, api_key, feed_url)
        return parse_channel_info(body)
