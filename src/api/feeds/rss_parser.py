"""
Feed Parser - turns an RSS 2.0 or Atom document into canonical Episode records.

Field policy per item:
- description: content:encoded, else description, else ""
- enclosure: url/length of the media attachment, else None
- artwork: item itunes:image, else channel artwork, else None
  (channel artwork: <image><url>, else channel itunes:image)
- guid: <guid>, else title, else ""
- duration: itunes:duration as given

Items are returned in document order. Nothing is sorted, filtered or de-duplicated.
"""

import re
import xml.etree.ElementTree as ET

from api.feeds.models import Episode, PodcastInfo
from utils.errors import FeedParseFailedError
from utils.get_logger import get_logger

logger = get_logger(__name__)

# Common XML namespaces used in podcast feeds
NAMESPACES = {
    "itunes": "http://www.itunes.com/dtds/podcast-1.0.dtd",
    "content": "http://purl.org/rss/1.0/modules/content/",
    "atom": "http://www.w3.org/2005/Atom",
    "media": "http://search.yahoo.com/mrss/",
}

ATOM_NS = f"{{{NAMESPACES['atom']}}}"


def parse_duration_seconds(duration_str: str | None) -> int | None:
    """
    Parse a feed duration string to seconds.
    Handles formats: HH:MM:SS, MM:SS, plain seconds, or text like "1 hour 30 minutes".

    Args:
        duration_str: Duration string from the feed

    Returns:
        Duration in seconds, or None if unparseable
    """
    if not duration_str:
        return None

    duration_str = duration_str.strip()

    if duration_str.isdigit():
        return int(duration_str)

    time_match = re.match(r"^(\d+):(\d{2}):(\d{2})$", duration_str)
    if time_match:
        hours, minutes, seconds = map(int, time_match.groups())
        return hours * 3600 + minutes * 60 + seconds

    time_match = re.match(r"^(\d+):(\d{2})$", duration_str)
    if time_match:
        minutes, seconds = map(int, time_match.groups())
        return minutes * 60 + seconds

    total_seconds = 0
    hour_match = re.search(r"(\d+)\s*(?:hour|hr)", duration_str, re.IGNORECASE)
    if hour_match:
        total_seconds += int(hour_match.group(1)) * 3600

    min_match = re.search(r"(\d+)\s*(?:minute|min)", duration_str, re.IGNORECASE)
    if min_match:
        total_seconds += int(min_match.group(1)) * 60

    sec_match = re.search(r"(\d+)\s*(?:second|sec)", duration_str, re.IGNORECASE)
    if sec_match:
        total_seconds += int(sec_match.group(1))

    return total_seconds if total_seconds > 0 else None


def _get_element_text(element: ET.Element | None, default: str | None = None) -> str | None:
    """Safely get text from an XML element."""
    if element is not None and element.text:
        return element.text.strip()
    return default


def _find_with_ns(element: ET.Element, tag: str, ns_key: str) -> ET.Element | None:
    """Find element with namespace prefix."""
    ns = NAMESPACES.get(ns_key, "")
    return element.find(f"{{{ns}}}{tag}") if ns else None


def _itunes_image(element: ET.Element) -> str | None:
    itunes_image = _find_with_ns(element, "image", "itunes")
    if itunes_image is not None:
        return itunes_image.get("href") or None
    return None


def _load_document(xml_content: str | bytes) -> tuple[str, ET.Element, list[ET.Element], str]:
    """
    Parse the document and locate the channel and its items.

    Returns:
        (feed_kind, channel, items, atom_prefix) where feed_kind is "rss" or "atom"

    Raises:
        FeedParseFailedError: If the body is not XML, or is neither an RSS channel nor an Atom feed
    """
    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError as e:
        logger.error(f"XML parse error: {e}")
        raise FeedParseFailedError(f"Invalid XML: {e}") from e
    except (LookupError, ValueError) as e:
        # Unknown or undecodable declared encoding
        logger.error(f"Error decoding feed: {e}")
        raise FeedParseFailedError(f"Unreadable feed encoding: {e}") from e

    if root.tag == "rss":
        channel = root.find("channel")
        if channel is None:
            raise FeedParseFailedError("RSS document has no <channel>")
        return "rss", channel, channel.findall("item"), ""

    if root.tag == f"{ATOM_NS}feed":
        return "atom", root, root.findall(f"{ATOM_NS}entry"), ATOM_NS
    if root.tag == "feed":
        return "atom", root, root.findall("entry"), ""

    raise FeedParseFailedError(f"Unsupported feed document root: {root.tag}")


# ---------------------------
# RSS 2.0
# ---------------------------


def _rss_channel_artwork(channel: ET.Element) -> str | None:
    image_url = _get_element_text(channel.find("image/url"))
    if image_url:
        return image_url
    return _itunes_image(channel)


def _parse_rss_item(item: ET.Element, channel_artwork: str | None) -> Episode:
    title = _get_element_text(item.find("title"))

    content = _get_element_text(_find_with_ns(item, "encoded", "content"))
    description = content if content else _get_element_text(item.find("description"), "")

    enclosure_url = None
    enclosure_length = None
    enclosure = item.find("enclosure")
    if enclosure is not None:
        enclosure_url = enclosure.get("url")
        enclosure_length = enclosure.get("length")

    artwork = _itunes_image(item) or channel_artwork

    authors = [a.text.strip() for a in item.findall("author") if a.text and a.text.strip()]
    if not authors:
        itunes_author = _get_element_text(_find_with_ns(item, "author", "itunes"))
        if itunes_author:
            authors = [itunes_author]

    links = [link.text.strip() for link in item.findall("link") if link.text and link.text.strip()]

    guid = _get_element_text(item.find("guid"))
    if not guid:
        # Titles are not unique; kept because the backend keys on it
        logger.debug(f"Item has no guid, falling back to title: {title}")
        guid = title or ""

    return Episode(
        title=title,
        description=description,
        pub_date=_get_element_text(item.find("pubDate")),
        links=links,
        enclosure_url=enclosure_url,
        enclosure_length=enclosure_length,
        artwork=artwork,
        content=content,
        authors=authors,
        guid=guid,
        duration=_get_element_text(_find_with_ns(item, "duration", "itunes")),
    )


# ---------------------------
# Atom
# ---------------------------


def _atom_channel_artwork(feed: ET.Element, ns: str) -> str | None:
    logo = _get_element_text(feed.find(f"{ns}logo")) or _get_element_text(feed.find(f"{ns}icon"))
    if logo:
        return logo
    return _itunes_image(feed)


def _parse_atom_entry(entry: ET.Element, channel_artwork: str | None, ns: str) -> Episode:
    title = _get_element_text(entry.find(f"{ns}title"))

    content = _get_element_text(entry.find(f"{ns}content"))
    description = content if content else _get_element_text(entry.find(f"{ns}summary"), "")

    links: list[str] = []
    enclosure_url = None
    enclosure_length = None
    for link in entry.findall(f"{ns}link"):
        href = link.get("href")
        if not href:
            continue
        rel = link.get("rel", "alternate")
        if rel == "enclosure":
            if enclosure_url is None:
                enclosure_url = href
                enclosure_length = link.get("length")
        elif rel == "alternate":
            links.append(href)

    authors = [
        name.text.strip()
        for name in entry.findall(f"{ns}author/{ns}name")
        if name.text and name.text.strip()
    ]
    if not authors:
        itunes_author = _get_element_text(_find_with_ns(entry, "author", "itunes"))
        if itunes_author:
            authors = [itunes_author]

    guid = _get_element_text(entry.find(f"{ns}id"))
    if not guid:
        logger.debug(f"Entry has no id, falling back to title: {title}")
        guid = title or ""

    pub_date = _get_element_text(entry.find(f"{ns}published")) or _get_element_text(
        entry.find(f"{ns}updated")
    )

    return Episode(
        title=title,
        description=description,
        pub_date=pub_date,
        links=links,
        enclosure_url=enclosure_url,
        enclosure_length=enclosure_length,
        artwork=_itunes_image(entry) or channel_artwork,
        content=content,
        authors=authors,
        guid=guid,
        duration=_get_element_text(_find_with_ns(entry, "duration", "itunes")),
    )


# ---------------------------
# Public API
# ---------------------------


def parse_feed_episodes(xml_content: str | bytes) -> list[Episode]:
    """
    Parse a feed document into canonical episodes.

    Args:
        xml_content: Raw feed document. Bytes are decoded per the XML declaration.

    Returns:
        Episodes in document order (empty if the channel has no items)

    Raises:
        FeedParseFailedError: If the document cannot be parsed as RSS or Atom
    """
    kind, channel, items, ns = _load_document(xml_content)

    if kind == "rss":
        channel_artwork = _rss_channel_artwork(channel)
        episodes = [_parse_rss_item(item, channel_artwork) for item in items]
    else:
        channel_artwork = _atom_channel_artwork(channel, ns)
        episodes = [_parse_atom_entry(entry, channel_artwork, ns) for entry in items]

    logger.debug(f"Parsed {len(episodes)} episodes from {kind} feed")
    return episodes


def parse_channel_info(xml_content: str | bytes) -> PodcastInfo:
    """
    Parse channel-level details from a feed document.

    Raises:
        FeedParseFailedError: If the document cannot be parsed as RSS or Atom
    """
    kind, channel, items, ns = _load_document(xml_content)

    if kind == "rss":
        explicit = _get_element_text(_find_with_ns(channel, "explicit", "itunes"), "")
        categories = [
            c.text.strip() for c in channel.findall("category") if c.text and c.text.strip()
        ]
        if not categories:
            categories = [
                c.get("text", "")
                for c in channel.findall(f"{{{NAMESPACES['itunes']}}}category")
                if c.get("text")
            ]
        return PodcastInfo(
            title=_get_element_text(channel.find("title"), ""),
            description=_get_element_text(channel.find("description"), ""),
            artwork_url=_rss_channel_artwork(channel),
            author=_get_element_text(_find_with_ns(channel, "author", "itunes"), ""),
            website=_get_element_text(channel.find("link"), ""),
            categories=categories,
            explicit=explicit.lower() in ("yes", "true"),
            episode_count=len(items),
        )

    website = ""
    for link in channel.findall(f"{ns}link"):
        if link.get("rel", "alternate") == "alternate" and link.get("href"):
            website = link.get("href", "")
            break
    explicit = _get_element_text(_find_with_ns(channel, "explicit", "itunes"), "")
    return PodcastInfo(
        title=_get_element_text(channel.find(f"{ns}title"), ""),
        description=_get_element_text(channel.find(f"{ns}subtitle"), ""),
        artwork_url=_atom_channel_artwork(channel, ns),
        author=_get_element_text(channel.find(f"{ns}author/{ns}name"), ""),
        website=website,
        categories=[c.get("term", "") for c in channel.findall(f"{ns}category") if c.get("term")],
        explicit=explicit.lower() in ("yes", "true"),
        episode_count=len(items),
    )
