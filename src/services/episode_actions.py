"""
Episode Actions - play, queue, save and download, written once against EpisodeHandle
so they work for every backend episode record.
"""

from adapters.app_state import AppStore, NowPlaying
from adapters.config import ClientSettings, require_user_id
from api.feeds.models import Episode
from api.feeds.rss_parser import parse_duration_seconds
from api.server.core import ServerClient
from api.server.episodes import EpisodeHandle
from api.server.models import DownloadEpisodeRequest, QueuePodcastRequest, SavePodcastRequest
from utils.errors import PodSearchError
from utils.get_logger import get_logger

logger = get_logger(__name__)


def format_duration(seconds: int) -> str:
    """Render seconds as HH:MM:SS."""
    seconds = max(seconds, 0)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{secs:02}"


def now_playing_for(episode: EpisodeHandle | Episode) -> NowPlaying:
    """Player props for a backend episode handle or a parsed feed episode."""
    if isinstance(episode, EpisodeHandle):
        seconds = episode.duration_seconds()
        return NowPlaying(
            src=episode.audio_url(),
            title=episode.title(),
            artwork_url=episode.artwork_url(),
            duration=format_duration(seconds),
            duration_sec=seconds,
        )

    seconds = parse_duration_seconds(episode.duration) or 0
    return NowPlaying(
        src=episode.enclosure_url or "",
        title=episode.title or "",
        artwork_url=episode.artwork or "",
        duration=episode.duration or format_duration(seconds),
        duration_sec=seconds,
    )


class EpisodeActions:
    def __init__(self, store: AppStore, client: ServerClient, user_id: int | None):
        self.store = store
        self.client = client
        self.user_id = user_id

    @classmethod
    def from_settings(cls, store: AppStore, settings: ClientSettings) -> "EpisodeActions":
        client = ServerClient(
            settings.server_name,
            settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
        )
        return cls(store, client, settings.user_id)

    def play(self, episode: EpisodeHandle | Episode) -> NowPlaying:
        """Point the player at an episode."""
        playing = now_playing_for(episode)
        self.store.replace(currently_playing=playing)
        logger.info(f"Playing '{playing.title}'")
        return playing

    async def queue(self, episode: EpisodeHandle) -> bool:
        """Add to the user's queue. Returns False (and records the error) on failure."""
        try:
            request = QueuePodcastRequest(
                episode_title=episode.title(),
                ep_url=episode.audio_url(),
                user_id=require_user_id(self.user_id),
            )
            await self.client.queue_episode(request)
        except PodSearchError as e:
            logger.error(f"Failed to queue episode {episode.episode_id()}: {e}")
            self.store.replace(error_message=str(e))
            return False
        return True

    async def save(self, episode: EpisodeHandle) -> bool:
        """Save for the user. Returns False (and records the error) on failure."""
        try:
            request = SavePodcastRequest(
                episode_title=episode.title(),
                ep_url=episode.audio_url(),
                user_id=require_user_id(self.user_id),
            )
            await self.client.save_episode(request)
        except PodSearchError as e:
            logger.error(f"Failed to save episode {episode.episode_id()}: {e}")
            self.store.replace(error_message=str(e))
            return False
        return True

    async def download(self, episode: EpisodeHandle) -> bool:
        """Ask the server to download. Returns False (and records the error) on failure."""
        try:
            request = DownloadEpisodeRequest(
                episode_id=episode.episode_id(),
                user_id=require_user_id(self.user_id),
            )
            await self.client.download_episode(request)
        except PodSearchError as e:
            logger.error(f"Failed to download episode {episode.episode_id()}: {e}")
            self.store.replace(error_message=str(e))
            return False
        return True
