"""
App State - the shared state container the search and feed flows publish into.

Fields are replaced wholesale, never mutated in place: every update produces a
new AppState, so a reader holding the previous snapshot never sees a partial write.
Concurrent writers are not serialized; the last replace wins.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from api.directory.models import UnifiedPodcast
from api.feeds.models import PodcastFeedResult
from api.server.models import SearchResponse
from utils.get_logger import get_logger

logger = get_logger(__name__)


class NowPlaying(BaseModel):
    """What the audio player should load."""

    src: str
    title: str
    artwork_url: str = ""
    duration: str = ""
    duration_sec: int = 0


class AppState(BaseModel):
    search_results: list[UnifiedPodcast] | None = Field(
        default=None, description="Unified directory results of the latest search"
    )
    search_episodes: SearchResponse | None = Field(
        default=None, description="Latest database episode search"
    )
    is_loading: bool = False
    expanded_descriptions: frozenset[str] = Field(
        default_factory=frozenset, description="Episode keys whose description is expanded"
    )
    podcast_feed_results: PodcastFeedResult | None = None
    error_message: str | None = None
    currently_playing: NowPlaying | None = None


class AppStore:
    """Holds the current AppState and applies whole-field replacements."""

    def __init__(self, state: AppState | None = None):
        self._state = state or AppState()

    def get(self) -> AppState:
        return self._state

    def replace(self, **fields: Any) -> AppState:
        """Replace the named fields and return the new state."""
        unknown = set(fields) - set(AppState.model_fields)
        if unknown:
            raise AttributeError(f"Unknown AppState fields: {sorted(unknown)}")
        self._state = self._state.model_copy(update=fields)
        logger.debug(f"State updated: {', '.join(sorted(fields))}")
        return self._state

    def reduce(self, reducer: Callable[[AppState], dict[str, Any]]) -> AppState:
        """Apply the field updates a reducer computes from the current state."""
        return self.replace(**reducer(self._state))

    def expand_episode(self, episode_key: str) -> AppState:
        return self.replace(
            expanded_descriptions=self._state.expanded_descriptions | {episode_key}
        )

    def collapse_episode(self, episode_key: str) -> AppState:
        return self.replace(
            expanded_descriptions=self._state.expanded_descriptions - {episode_key}
        )

    def toggle_episode(self, episode_key: str) -> AppState:
        if episode_key in self._state.expanded_descriptions:
            return self.collapse_episode(episode_key)
        return self.expand_episode(episode_key)
