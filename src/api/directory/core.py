"""
Directory Core Service - connectivity probe and search against the configured
directory search endpoint.
"""

from collections.abc import Mapping

from adapters.config import require_search_api_url
from api.directory.models import PodcastSearchResult, UnifiedPodcast
from api.directory.unify import unify_search_result
from contracts.models import DEFAULT_SEARCH_INDEX, SearchIndex
from utils.base_api_client import BaseAPIClient
from utils.errors import ParseFailureError
from utils.get_logger import get_logger

logger = get_logger(__name__)


class DirectoryClient(BaseAPIClient):
    """
    Client for the directory search endpoint.
    The endpoint proxies PodcastIndex and iTunes, selected by the `index` parameter.
    """

    _rate_limit_endpoint = "directory"
    _rate_limit_max = 5
    _rate_limit_period = 1.0

    def __init__(self, search_api_url: str | None, timeout_seconds: float = 10):
        self.search_api_url = search_api_url
        self.timeout_seconds = timeout_seconds

    def _require_url(self) -> str:
        return require_search_api_url(self.search_api_url)

    async def test_connection(self) -> None:
        """
        Lightweight probe of the search endpoint. Any 2xx is success.

        Raises:
            ConfigMissingError: If no search API URL is configured
            TransportFailureError: On a non-2xx status or network error
        """
        url = self._require_url()
        await self._core_async_request("GET", url, read="none")
        logger.debug(f"Search endpoint reachable: {url}")

    async def get_podcast_info(
        self, term: str, index: SearchIndex | str = DEFAULT_SEARCH_INDEX
    ) -> PodcastSearchResult:
        """
        Run a directory search and return the provider-shaped body.

        Args:
            term: Free-text search term
            index: Provider key ("podcast_index" or "itunes")

        Raises:
            ConfigMissingError: If no search API URL is configured
            TransportFailureError: On a non-2xx status or network error
            ParseFailureError: If the body is not a JSON object
        """
        url = self._require_url()
        index_key = index.value if isinstance(index, SearchIndex) else str(index)

        data = await self._core_async_request(
            "GET", url, params={"query": term, "index": index_key}
        )
        if not isinstance(data, Mapping):
            raise ParseFailureError(
                f"Expected a JSON object from search endpoint, got {type(data).__name__}"
            )
        return PodcastSearchResult.from_dict(data)

    async def search(
        self, term: str, index: SearchIndex | str = DEFAULT_SEARCH_INDEX
    ) -> list[UnifiedPodcast]:
        """Search and normalize results into canonical podcast records."""
        result = await self.get_podcast_info(term, index)
        podcasts = unify_search_result(result)
        logger.info(f"Directory search '{term}' ({index}): {len(podcasts)} results")
        return podcasts
