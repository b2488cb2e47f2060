"""
Episode View - view-models for the directory and database search result lists.

Produces per-podcast and per-episode display data (sanitized, optionally truncated
description, release label, expanded flag) or the empty-results placeholder.
Rendering itself happens elsewhere.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from adapters.app_state import AppState
from api.directory.models import UnifiedPodcast
from api.server.episodes import EpisodeHandle

DESCRIPTION_PREVIEW_CHARS = 300
NO_RESULTS_HEADER = "No Search Results Found"
NO_RESULTS_PARAGRAPH = "Perhaps try again, but search for something slightly different :/"

# Elements dropped entirely from feed-supplied descriptions
UNSAFE_TAGS = ("script", "style", "iframe", "object", "embed", "form")


@dataclass
class EmptyMessage:
    header: str
    paragraph: str


@dataclass
class EpisodeItemView:
    key: str
    episode: EpisodeHandle
    title: str
    artwork_url: str
    description: str
    is_expanded: bool
    is_truncated: bool
    release_label: str


def sanitize_html_with_blank_target(html: str) -> str:
    """
    Strip active content from description markup and open every link in a new tab.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    for tag in soup.find_all(list(UNSAFE_TAGS)):
        tag.decompose()

    for tag in soup.find_all(True):
        for attr in list(tag.attrs):
            if attr.lower().startswith("on"):
                del tag.attrs[attr]

    for link in soup.find_all("a"):
        href = link.get("href", "")
        if isinstance(href, str) and href.strip().lower().startswith("javascript:"):
            del link["href"]
        link["target"] = "_blank"
        link["rel"] = "noopener noreferrer"

    return str(soup)


def truncate_description(html: str, max_length: int = DESCRIPTION_PREVIEW_CHARS) -> tuple[str, bool]:
    """
    Shorten a description to max_length visible characters.

    Returns:
        (description, is_truncated). A truncated description is plain text ending in "...".
    """
    text = BeautifulSoup(html or "", "html.parser").get_text()
    if len(text) <= max_length:
        return html, False
    return text[:max_length].rstrip() + "...", True


def build_episode_item(episode: EpisodeHandle, expanded: frozenset[str]) -> EpisodeItemView:
    key = str(episode.episode_id())
    is_expanded = key in expanded

    description = sanitize_html_with_blank_target(episode.description())
    is_truncated = False
    if not is_expanded:
        description, is_truncated = truncate_description(description)

    return EpisodeItemView(
        key=key,
        episode=episode,
        title=episode.title(),
        artwork_url=episode.artwork_url(),
        description=description,
        is_expanded=is_expanded,
        is_truncated=is_truncated,
        release_label=f"Released on: {episode.pub_date()}",
    )


def build_search_episode_view(state: AppState) -> list[EpisodeItemView] | EmptyMessage | None:
    """
    View-model for the database search results.

    Returns:
        None before any search, the placeholder for an empty result list,
        otherwise one item per episode in server order
    """
    if state.search_episodes is None:
        return None

    episodes = state.search_episodes.data
    if not episodes:
        return EmptyMessage(header=NO_RESULTS_HEADER, paragraph=NO_RESULTS_PARAGRAPH)

    return [
        build_episode_item(EpisodeHandle.of(episode), state.expanded_descriptions)
        for episode in episodes
    ]


@dataclass
class PodcastItemView:
    key: str
    podcast: UnifiedPodcast
    title: str
    author: str
    artwork_url: str
    description: str
    episode_count: int
    explicit: bool


def build_podcast_item(podcast: UnifiedPodcast) -> PodcastItemView:
    description, _ = truncate_description(sanitize_html_with_blank_target(podcast.description))
    return PodcastItemView(
        key=str(podcast.id),
        podcast=podcast,
        title=podcast.title,
        author=podcast.author,
        artwork_url=podcast.artwork or podcast.image,
        description=description,
        episode_count=podcast.episode_count,
        explicit=podcast.explicit,
    )


def build_podcast_results_view(state: AppState) -> list[PodcastItemView] | EmptyMessage | None:
    """
    View-model for the unified directory search results.

    Returns:
        None before any search, the placeholder for an empty result list,
        otherwise one item per podcast in provider order
    """
    if state.search_results is None:
        return None
    if not state.search_results:
        return EmptyMessage(header=NO_RESULTS_HEADER, paragraph=NO_RESULTS_PARAGRAPH)
    return [build_podcast_item(podcast) for podcast in state.search_results]
