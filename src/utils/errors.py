"""
Error taxonomy for the search and ingestion layer.

Only transport and parse stages raise. Normalizers degrade missing fields to
neutral defaults and never raise.
"""


class PodSearchError(Exception):
    """Base exception for all search/ingestion errors."""

    pass


class ConfigMissingError(PodSearchError):
    """A required endpoint or credential is not configured.

    Raised before any network activity and never retried.
    """

    pass


class TransportFailureError(PodSearchError):
    """Non-2xx response or network-level failure."""

    def __init__(self, status_text: str, status: int | None = None):
        super().__init__(status_text)
        self.status = status
        self.status_text = status_text


class FetchFailedError(TransportFailureError):
    """The backend feed proxy did not return the feed."""

    pass


class ParseFailureError(PodSearchError):
    """Malformed JSON or feed body."""

    pass


class FeedParseFailedError(ParseFailureError):
    """Feed document could not be parsed as RSS or Atom."""

    pass
