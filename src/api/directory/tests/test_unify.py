"""
Tests for the directory models and the provider-to-UnifiedPodcast conversions.
"""

import pytest

from api.directory.models import (
    ITunesPodcast,
    PodcastIndexFeed,
    PodcastSearchResult,
    UnifiedPodcast,
)
from api.directory.unify import (
    explicit_from_itunes,
    parse_rfc3339_timestamp,
    unify,
    unify_itunes,
    unify_podcast_index,
    unify_search_result,
)
from contracts.models import ITUNES_DESCRIPTION_PLACEHOLDER

pytestmark = pytest.mark.unit


class TestPodcastIndexConversion:
    """Tests for PodcastIndex feeds."""

    def test_field_for_field_copy(self, podcastindex_body):
        feed = PodcastIndexFeed.from_dict(podcastindex_body["feeds"][0])
        podcast = unify_podcast_index(feed)

        assert podcast.id == 75075
        assert podcast.title == "Startup Stories"
        assert podcast.url == "https://feeds.example.com/startup-stories.xml"
        assert podcast.original_url == "https://old.example.com/startup.rss"
        assert podcast.link == "https://startupstories.example.com"
        assert podcast.description == "Founders tell the story of their first year."
        assert podcast.author == "Jane Founder"
        assert podcast.owner_name == "Founder Media"
        assert podcast.image == "https://cdn.example.com/startup/image.jpg"
        assert podcast.artwork == "https://cdn.example.com/startup/artwork.jpg"
        assert podcast.last_update_time == 1704456000
        assert podcast.categories == {"9": "Business", "10": "Entrepreneurship"}
        assert podcast.explicit is False
        assert podcast.episode_count == 142

    def test_explicit_copied_verbatim(self, podcastindex_body):
        feed = PodcastIndexFeed.from_dict(podcastindex_body["feeds"][1])
        assert unify(feed).explicit is True

    def test_null_categories_become_empty_mapping(self, podcastindex_body):
        feed = PodcastIndexFeed.from_dict(podcastindex_body["feeds"][1])
        assert unify(feed).categories == {}

    def test_empty_feed_dict_is_fully_defaulted(self):
        podcast = unify(PodcastIndexFeed.from_dict({}))

        assert podcast == UnifiedPodcast()
        assert podcast.title == ""
        assert podcast.id == 0
        assert podcast.last_update_time == 0
        assert podcast.categories == {}
        assert podcast.explicit is False

    def test_wrong_types_degrade_to_defaults(self):
        feed = PodcastIndexFeed.from_dict(
            {
                "id": "not-a-number",
                "title": None,
                "categories": ["Business"],
                "episodeCount": True,
                "lastUpdateTime": "1700000000",
            }
        )
        podcast = unify(feed)

        assert podcast.id == 0
        assert podcast.title == ""
        assert podcast.categories == {}
        assert podcast.episode_count == 0
        assert podcast.last_update_time == 1700000000


class TestITunesConversion:
    """Tests for iTunes search results."""

    def test_full_result(self, itunes_body):
        podcast = unify_itunes(ITunesPodcast.from_dict(itunes_body["results"][0]))

        assert podcast.id == 1150510297
        assert podcast.title == "How I Built This"
        assert podcast.url == "https://feeds.example.com/how-i-built-this"
        assert podcast.original_url == podcast.url
        assert podcast.link.startswith("https://podcasts.apple.com/")
        assert podcast.author == "Wondery"
        assert podcast.owner_name == "Wondery"
        assert podcast.image == "https://is1-ssl.example.com/image/100x100bb.jpg"
        assert podcast.artwork == podcast.image
        assert podcast.last_update_time == 1704456000
        assert podcast.explicit is False
        assert podcast.episode_count == 300

    def test_description_is_placeholder(self, itunes_body):
        podcast = unify(ITunesPodcast.from_dict(itunes_body["results"][0]))
        assert podcast.description == ITUNES_DESCRIPTION_PLACEHOLDER
        assert podcast.description == "Descriptions not provided by iTunes"

    def test_genres_keyed_by_position(self, itunes_body):
        podcast = unify(ITunesPodcast.from_dict(itunes_body["results"][0]))

        assert list(podcast.categories.keys()) == ["0", "1", "2"]
        assert list(podcast.categories.values()) == ["Business", "Podcasts", "Entrepreneurship"]

    def test_unparsable_release_date_is_zero(self, itunes_body):
        podcast = unify(ITunesPodcast.from_dict(itunes_body["results"][1]))
        assert podcast.last_update_time == 0

    @pytest.mark.parametrize(
        "release_date", ["20240105T120000Z", "2024-W01-1T00:00:00Z", "2024-01-05T12Z"]
    )
    def test_iso8601_only_release_date_is_zero(self, release_date):
        podcast = unify(ITunesPodcast.from_dict({"releaseDate": release_date}))
        assert podcast.last_update_time == 0

    def test_missing_track_count_defaults_to_zero(self, itunes_body):
        podcast = unify(ITunesPodcast.from_dict(itunes_body["results"][1]))
        assert podcast.episode_count == 0

    def test_explicit_result(self, itunes_body):
        podcast = unify(ITunesPodcast.from_dict(itunes_body["results"][1]))
        assert podcast.explicit is True

    def test_empty_result_dict_is_total(self):
        podcast = unify(ITunesPodcast.from_dict({}))

        assert podcast.id == 0
        assert podcast.categories == {}
        assert podcast.last_update_time == 0
        assert podcast.description == ITUNES_DESCRIPTION_PLACEHOLDER

    def test_non_list_genres_ignored(self):
        podcast = unify(ITunesPodcast.from_dict({"genres": "Business"}))
        assert podcast.categories == {}


class TestExplicitFromItunes:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("explicit", True),
            ("notExplicit", False),
            ("cleaned", False),
            ("", False),
            (None, False),
        ],
    )
    def test_tri_state(self, value, expected):
        assert explicit_from_itunes(value) is expected


class TestParseRfc3339Timestamp:
    def test_utc_suffix(self):
        assert parse_rfc3339_timestamp("2024-01-05T12:00:00Z") == 1704456000

    def test_numeric_offset(self):
        assert parse_rfc3339_timestamp("2024-01-05T14:00:00+02:00") == 1704456000

    def test_lowercase_separator_and_fraction(self):
        assert parse_rfc3339_timestamp("2024-01-05t12:00:00.5z") == 1704456000

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "2024-01-05",
            "2024-01-05T12:00:00",
            "yesterday",
            "2024-13-45T99:00:00Z",
            "20240105T120000Z",
            "2024-W01-1T00:00:00Z",
            "2024-01-05T12Z",
            "2024-01-05T12:00:00+0200",
        ],
    )
    def test_invalid_or_offsetless_is_zero(self, value):
        assert parse_rfc3339_timestamp(value) == 0


class TestUnifySearchResult:
    def test_podcastindex_envelope(self, podcastindex_body):
        result = PodcastSearchResult.from_dict(podcastindex_body)

        assert result.status == "true"
        assert result.results is None
        podcasts = unify_search_result(result)
        assert [p.id for p in podcasts] == [75075, 920666]

    def test_itunes_envelope(self, itunes_body):
        result = PodcastSearchResult.from_dict(itunes_body)

        assert result.result_count == 2
        assert result.feeds is None
        podcasts = unify_search_result(result)
        assert [p.title for p in podcasts] == ["How I Built This", "Late Night Startup"]

    def test_empty_results(self):
        result = PodcastSearchResult.from_dict({"resultCount": 0, "results": []})
        assert unify_search_result(result) == []

    def test_body_with_neither_list(self):
        assert unify_search_result(PodcastSearchResult.from_dict({"status": "false"})) == []

    def test_non_mapping_entries_skipped(self):
        result = PodcastSearchResult.from_dict({"results": [None, "x", {"trackId": 1}]})
        podcasts = unify_search_result(result)

        assert len(podcasts) == 1
        assert podcasts[0].id == 1


class TestUnifiedPodcastSerialization:
    def test_dumps_with_upstream_names(self, podcastindex_body):
        podcast = unify(PodcastIndexFeed.from_dict(podcastindex_body["feeds"][0]))
        data = podcast.to_dict()

        assert data["originalUrl"] == "https://old.example.com/startup.rss"
        assert data["ownerName"] == "Founder Media"
        assert data["lastUpdateTime"] == 1704456000
        assert data["episodeCount"] == 142

    def test_validates_from_upstream_names(self):
        podcast = UnifiedPodcast.model_validate({"ownerName": "Someone", "episodeCount": 3})
        assert podcast.owner_name == "Someone"
        assert podcast.episode_count == 3
