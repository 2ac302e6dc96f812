"""mixtape - Curate a personal list of YouTube and Spotify links.

Paste a link, give it a title and a note, and the list is kept on this
device between sessions. Links are resolved to privacy-respecting embed
URLs without any network access.

Examples:
    Resolve a link:
    ```python
    from mixtape import resolve

    reference = resolve("https://youtu.be/dQw4w9WgXcQ")
    print(reference.embed_url)
    ```

    Keep a persisted playlist:
    ```python
    from mixtape import create_store

    store = create_store()
    entry = store.add("https://open.spotify.com/album/1DFixLWuPkv3KT3TnV35m3", "Summer")
    store.toggle_favorite(entry.id)
    ```
"""

from pathlib import Path

from mixtape.embed import embed_html
from mixtape.exceptions import (
    EntryNotFoundError,
    MixtapeError,
    SnapshotFormatError,
    StorageUnavailableError,
)
from mixtape.models import (
    EntryFilter,
    FailureKind,
    ImportFailure,
    ImportSuccess,
    MediaReference,
    PlaylistEntry,
    Provider,
    ResolutionFailure,
    SpotifyKind,
)
from mixtape.resolver import is_supported_url, resolve
from mixtape.settings import Settings, get_settings
from mixtape.storage import JsonFileStorage, MemoryStorage, SnapshotStorage
from mixtape.store import PlaylistStore


def create_store(
    settings: Settings | None = None, data_dir: Path | None = None
) -> PlaylistStore:
    """Create a playlist store persisted to a JSON file.

    This is the recommended way to open the user's playlist.

    Args:
        settings: Optional settings. Uses environment-based settings if omitted.
        data_dir: Optional directory overriding ``settings.data_dir``.

    Returns:
        A PlaylistStore loaded from disk (empty if nothing was saved yet).

    Examples:
        ```python
        store = create_store(data_dir=Path("./playlist"))
        ```
    """
    settings = settings or get_settings()
    storage = JsonFileStorage(data_dir or settings.data_dir, settings.storage_key)
    return PlaylistStore(storage)


__all__ = [
    "EntryFilter",
    "EntryNotFoundError",
    "FailureKind",
    "ImportFailure",
    "ImportSuccess",
    "JsonFileStorage",
    "MediaReference",
    "MemoryStorage",
    "MixtapeError",
    "PlaylistEntry",
    "PlaylistStore",
    "Provider",
    "ResolutionFailure",
    "Settings",
    "SnapshotFormatError",
    "SnapshotStorage",
    "SpotifyKind",
    "StorageUnavailableError",
    "create_store",
    "embed_html",
    "get_settings",
    "is_supported_url",
    "resolve",
]
