"""
Search Service - drives directory searches and database episode searches into the
shared AppStore.

Directory search, per submission:
    IDLE -> PROBING -> QUERYING -> UNIFIED
                  \\          \\-> FAILED
                   \\-> FAILED

The probe strictly precedes the query and the query strictly precedes publication.
is_loading is reset on every path, and before navigating to the results route.
Overlapping submissions are not serialized: by default the last response to arrive
wins. With drop_stale_responses=True a response from a submission that has since
been superseded is dropped (phase DISCARDED).
"""

import asyncio
import inspect
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from adapters.app_state import AppStore
from adapters.config import ClientSettings, require_user_id
from api.directory.core import DirectoryClient
from api.directory.models import UnifiedPodcast
from api.server.core import ServerClient
from api.server.models import SearchRequest, SearchResponse
from contracts.models import DEFAULT_SEARCH_INDEX, RESULTS_ROUTE, SearchIndex
from utils.errors import PodSearchError, TransportFailureError
from utils.get_logger import get_logger

logger = get_logger(__name__)

Navigate = Callable[[str], Any]


class SearchPhase(str, Enum):
    IDLE = "idle"
    PROBING = "probing"
    QUERYING = "querying"
    UNIFIED = "unified"
    FAILED = "failed"
    DISCARDED = "discarded"


class SearchSubmission(BaseModel):
    """Outcome of one directory search submission."""

    sequence: int
    term: str
    index: str
    phase: SearchPhase = SearchPhase.IDLE
    results: list[UnifiedPodcast] = Field(default_factory=list)
    error: str | None = None
    status_code: int | None = None


async def _call_navigate(navigate: Navigate | None, route: str) -> None:
    if navigate is None:
        return
    outcome = navigate(route)
    if inspect.isawaitable(outcome):
        await outcome


class SearchOrchestrator:
    """Connectivity probe, directory query and publication of unified results."""

    def __init__(
        self,
        store: AppStore,
        client: DirectoryClient,
        navigate: Navigate | None = None,
        drop_stale_responses: bool = False,
    ):
        self.store = store
        self.client = client
        self.navigate = navigate
        self.drop_stale_responses = drop_stale_responses
        self._sequence = 0

    @classmethod
    def from_settings(
        cls,
        store: AppStore,
        settings: ClientSettings,
        navigate: Navigate | None = None,
        drop_stale_responses: bool = False,
    ) -> "SearchOrchestrator":
        client = DirectoryClient(
            settings.search_api_url, timeout_seconds=settings.request_timeout_seconds
        )
        return cls(store, client, navigate=navigate, drop_stale_responses=drop_stale_responses)

    def _is_stale(self, submission: SearchSubmission) -> bool:
        return self.drop_stale_responses and submission.sequence != self._sequence

    async def submit(
        self, term: str, index: SearchIndex | str = DEFAULT_SEARCH_INDEX
    ) -> SearchSubmission:
        """
        Run one directory search submission.

        Args:
            term: Free-text search term
            index: Provider key ("podcast_index" or "itunes")

        Returns:
            The submission with its terminal phase (UNIFIED, FAILED or DISCARDED)
        """
        self._sequence += 1
        index_key = index.value if isinstance(index, SearchIndex) else str(index)
        submission = SearchSubmission(sequence=self._sequence, term=term, index=index_key)

        self.store.replace(is_loading=True)
        try:
            submission.phase = SearchPhase.PROBING
            await self.client.test_connection()

            submission.phase = SearchPhase.QUERYING
            podcasts = await self.client.search(term, index_key)

            if self._is_stale(submission):
                logger.info(f"Dropping stale results for '{term}' (submission {submission.sequence})")
                submission.phase = SearchPhase.DISCARDED
                return submission

            self.store.replace(search_results=podcasts, error_message=None)
            submission.results = podcasts
            submission.phase = SearchPhase.UNIFIED
        except PodSearchError as e:
            if self._is_stale(submission):
                submission.phase = SearchPhase.DISCARDED
                return submission
            failed_during = submission.phase.value
            submission.phase = SearchPhase.FAILED
            submission.error = str(e)
            if isinstance(e, TransportFailureError):
                submission.status_code = e.status
            logger.error(f"Search '{term}' failed while {failed_during}: {e}")
            self.store.replace(error_message=str(e))
        finally:
            if not self._is_stale(submission):
                self.store.replace(is_loading=False)

        if submission.phase == SearchPhase.UNIFIED:
            await _call_navigate(self.navigate, RESULTS_ROUTE)
        return submission


class EpisodeSearch:
    """Database episode search against the backend."""

    def __init__(
        self,
        store: AppStore,
        client: ServerClient,
        user_id: int | None,
        settle_seconds: float = 1.0,
    ):
        self.store = store
        self.client = client
        self.user_id = user_id
        self.settle_seconds = settle_seconds

    @classmethod
    def from_settings(cls, store: AppStore, settings: ClientSettings) -> "EpisodeSearch":
        client = ServerClient(
            settings.server_name,
            settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
        )
        return cls(store, client, settings.user_id, settle_seconds=settings.settle_seconds)

    async def submit(self, term: str) -> SearchResponse | None:
        """
        Search the backend and replace search_episodes with the new response.

        Waits the layout-settle delay before the request. On failure the error is
        recorded and search_episodes keeps its previous value.

        Returns:
            The new SearchResponse, or None on failure
        """
        try:
            request = SearchRequest(search_term=term, user_id=require_user_id(self.user_id))

            await asyncio.sleep(self.settle_seconds)
            response = await self.client.search_database(request)
        except PodSearchError as e:
            logger.error(f"Failed to search database: {e}")
            self.store.replace(error_message=str(e))
            return None

        self.store.replace(search_episodes=response, error_message=None)
        return response
