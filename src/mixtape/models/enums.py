"""Enumerations for mixtape domain models."""

from enum import StrEnum


class Provider(StrEnum):
    """Media providers a pasted link can resolve to."""

    YOUTUBE = "youtube"
    SPOTIFY = "spotify"

    @property
    def label(self) -> str:
        """Human-readable provider name for display."""
        match self:
            case Provider.YOUTUBE:
                return "YouTube"
            case Provider.SPOTIFY:
                return "Spotify"


class SpotifyKind(StrEnum):
    """Spotify content types that have an embeddable player."""

    TRACK = "track"
    ALBUM = "album"
    PLAYLIST = "playlist"
    EPISODE = "episode"
    SHOW = "show"


class EntryFilter(StrEnum):
    """Predicate tags accepted by `PlaylistStore.filter`."""

    ALL = "all"
    FAVORITES = "favorites"
    YOUTUBE = "youtube"
    SPOTIFY = "spotify"


class FailureKind(StrEnum):
    """Classification of a failed resolution or import.

    - Resolution: INVALID_URL, UNSUPPORTED_PROVIDER
    - Import: INVALID_FORMAT
    """

    INVALID_URL = "invalid_url"
    UNSUPPORTED_PROVIDER = "unsupported_provider"
    INVALID_FORMAT = "invalid_format"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case FailureKind.INVALID_URL:
                return "not a valid link"
            case FailureKind.UNSUPPORTED_PROVIDER:
                return "unsupported link (paste a YouTube or Spotify link)"
            case FailureKind.INVALID_FORMAT:
                return "could not read playlist file"
