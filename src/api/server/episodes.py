"""
Episode Handle - one view over the six backend episode records.

A handle is a tagged union: the kind says which record shape it wraps. Consumers
read artwork, title, id, audio URL, duration, description and release date through
the handle and never touch variant-specific fields. Two handles are equal only when
they wrap the same kind of record with equal fields.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from api.server.models import (
    DownloadedEpisode,
    FreshFeedEpisode,
    HistoryEpisode,
    QueuedEpisode,
    SavedEpisode,
    SearchResultEpisode,
)
from contracts.models import EpisodeKind

EpisodeRecord = (
    FreshFeedEpisode
    | QueuedEpisode
    | SavedEpisode
    | HistoryEpisode
    | DownloadedEpisode
    | SearchResultEpisode
)

R = TypeVar("R")

RECORD_KINDS: dict[type, EpisodeKind] = {
    FreshFeedEpisode: EpisodeKind.FRESH,
    QueuedEpisode: EpisodeKind.QUEUED,
    SavedEpisode: EpisodeKind.SAVED,
    HistoryEpisode: EpisodeKind.HISTORY,
    DownloadedEpisode: EpisodeKind.DOWNLOADED,
    SearchResultEpisode: EpisodeKind.SEARCH_RESULT,
}


@dataclass(eq=False)
class EpisodeHandle:
    kind: EpisodeKind
    record: EpisodeRecord

    def __post_init__(self) -> None:
        expected = RECORD_KINDS.get(type(self.record))
        if expected is None:
            raise TypeError(f"Unsupported episode record type: {type(self.record).__name__}")
        if expected != self.kind:
            raise TypeError(
                f"Episode kind {self.kind.value} does not match record type "
                f"{type(self.record).__name__}"
            )

    @classmethod
    def of(cls, record: EpisodeRecord) -> "EpisodeHandle":
        """Tag a backend record by its concrete type.

        Raises:
            TypeError: If the record is not one of the six episode shapes
        """
        kind = RECORD_KINDS.get(type(record))
        if kind is None:
            raise TypeError(f"Unsupported episode record type: {type(record).__name__}")
        return cls(kind=kind, record=record)

    def artwork_url(self) -> str:
        return self.record.episode_artwork

    def title(self) -> str:
        return self.record.episode_title

    def episode_id(self) -> int:
        return self.record.episode_id

    def audio_url(self) -> str:
        return self.record.episode_url

    def duration_seconds(self) -> int:
        return self.record.episode_duration

    def description(self) -> str:
        return self.record.episode_description

    def pub_date(self) -> str:
        return self.record.episode_pub_date

    def duplicate(self) -> "EpisodeHandle":
        """Independent deep copy; mutating either side never affects the other."""
        return EpisodeHandle(kind=self.kind, record=self.record.model_copy(deep=True))

    def narrow(self, record_type: type[R]) -> R | None:
        """Return the wrapped record if it is exactly `record_type`, else None."""
        if type(self.record) is record_type:
            return self.record
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EpisodeHandle):
            return False
        if self.kind != other.kind:
            return False
        return self.record == other.record


def wrap_episodes(records: Iterable[EpisodeRecord]) -> list[EpisodeHandle]:
    """Wrap backend records, keeping their order."""
    return [EpisodeHandle.of(record) for record in records]
