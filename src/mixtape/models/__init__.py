"""Data models for mixtape.

Public API:
    MediaReference - Canonical embeddable reference from link resolution
    PlaylistEntry - Persisted playlist item with user annotations
    ResolutionFailure, ImportFailure, ImportSuccess - Typed operation results
    Provider, SpotifyKind, EntryFilter, FailureKind - Enumerations
"""

from mixtape.models.entry import PlaylistEntry
from mixtape.models.enums import EntryFilter, FailureKind, Provider, SpotifyKind
from mixtape.models.media import MediaReference, embed_url_for, title_hint_for
from mixtape.models.results import (
    ImportFailure,
    ImportResult,
    ImportSuccess,
    ResolutionFailure,
    ResolveResult,
)

__all__ = [
    "EntryFilter",
    "FailureKind",
    "ImportFailure",
    "ImportResult",
    "ImportSuccess",
    "MediaReference",
    "PlaylistEntry",
    "Provider",
    "ResolutionFailure",
    "ResolveResult",
    "SpotifyKind",
    "embed_url_for",
    "title_hint_for",
]
