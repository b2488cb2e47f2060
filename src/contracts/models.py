from enum import Enum

"""
These are the known keys shared between the search UI and the core.
"""


class SearchIndex(str, Enum):
    """Directory search provider selected in the search bar."""

    PODCAST_INDEX = "podcast_index"
    ITUNES = "itunes"


class EpisodeKind(str, Enum):
    """
    Concrete backend episode record behind an episode handle.
    Each value tags exactly one record shape.
    """

    FRESH = "fresh"
    QUEUED = "queued"
    SAVED = "saved"
    HISTORY = "history"
    DOWNLOADED = "downloaded"
    SEARCH_RESULT = "search_result"


DEFAULT_SEARCH_INDEX = SearchIndex.PODCAST_INDEX
ITUNES_DESCRIPTION_PLACEHOLDER = "Descriptions not provided by iTunes"
RESULTS_ROUTE = "/pod_layout"
