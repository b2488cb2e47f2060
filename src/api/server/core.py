"""
Server Core Service - the first-party backend's data endpoints:
database episode search and the queue/save/download actions.
"""

from collections.abc import Mapping

from pydantic import ValidationError

from adapters.config import require_server
from api.server.models import (
    DownloadEpisodeRequest,
    QueuePodcastRequest,
    SavePodcastRequest,
    SearchRequest,
    SearchResponse,
)
from utils.base_api_client import BaseAPIClient
from utils.errors import ParseFailureError
from utils.get_logger import get_logger

logger = get_logger(__name__)

SEARCH_DATA_PATH = "/api/data/search_data"
QUEUE_POD_PATH = "/api/data/queue_pod"
SAVE_EPISODE_PATH = "/api/data/save_episode"
DOWNLOAD_PODCAST_PATH = "/api/data/download_podcast"


class ServerClient(BaseAPIClient):
    """Client for the backend data API. Every call carries the Api-Key header."""

    _rate_limit_endpoint = "server"
    _rate_limit_max = 10
    _rate_limit_period = 1.0

    def __init__(
        self, server_name: str | None, api_key: str | None, timeout_seconds: float = 10
    ):
        self.server_name = server_name.rstrip("/") if server_name else server_name
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds

    async def _post(self, path: str, body: dict, read: str = "none"):
        server_name, api_key = require_server(self.server_name, self.api_key)
        headers = {"Content-Type": "application/json", "Api-Key": api_key}
        return await self._core_async_request(
            "POST", f"{server_name}{path}", headers=headers, json_body=body, read=read
        )

    async def search_database(self, request: SearchRequest) -> SearchResponse:
        """
        Search the backend's episode database.

        Args:
            request: Search term and requesting user

        Returns:
            SearchResponse with episodes in server order

        Raises:
            ConfigMissingError: If the API key or server is missing (before any request)
            TransportFailureError: On a non-2xx status or network error
            ParseFailureError: If the body does not match the expected shape
        """
        data = await self._post(SEARCH_DATA_PATH, request.to_dict(), read="json")
        if not isinstance(data, Mapping):
            raise ParseFailureError(
                f"Expected a JSON object from {SEARCH_DATA_PATH}, got {type(data).__name__}"
            )
        try:
            response = SearchResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected search_data response shape: {e}")
            raise ParseFailureError(f"Failed to search database: {e}") from e

        logger.info(f"Database search '{request.search_term}': {len(response.data)} episodes")
        return response

    async def queue_episode(self, request: QueuePodcastRequest) -> None:
        """Add an episode to the user's queue."""
        await self._post(QUEUE_POD_PATH, request.to_dict())
        logger.info(f"Queued episode '{request.episode_title}' for user {request.user_id}")

    async def save_episode(self, request: SavePodcastRequest) -> None:
        """Save an episode for the user."""
        await self._post(SAVE_EPISODE_PATH, request.to_dict())
        logger.info(f"Saved episode '{request.episode_title}' for user {request.user_id}")

    async def download_episode(self, request: DownloadEpisodeRequest) -> None:
        """Ask the server to download an episode."""
        await self._post(DOWNLOAD_PODCAST_PATH, request.to_dict())
        logger.info(f"Requested download of episode {request.episode_id} for user {request.user_id}")
