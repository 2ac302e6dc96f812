"""Playlist store: the ordered, persisted collection of entries."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from mixtape.exceptions import SnapshotFormatError, StorageUnavailableError
from mixtape.models.entry import PlaylistEntry
from mixtape.models.enums import EntryFilter, Provider
from mixtape.models.results import (
    ImportFailure,
    ImportResult,
    ImportSuccess,
    ResolutionFailure,
)
from mixtape.resolver import Resolver, resolve
from mixtape.snapshot import decode_snapshot, encode_snapshot
from mixtape.storage import SnapshotStorage
from mixtape.types import Clock, IdGenerator, generate_entry_id, utc_now

logger = logging.getLogger(__name__)


class PlaylistStore:
    """Ordered collection of playlist entries with write-through persistence.

    Ordering:
        Newest first by insertion. Insertion order is the source of truth
        and survives persistence and import/export round trips; entries are
        never re-sorted by timestamp.

    Persistence:
        The whole collection is written to storage after every successful
        mutation. Storage failures are logged and do not roll back the
        in-memory change. A missing or unreadable snapshot at startup yields
        an empty collection.

    Failures:
        Resolution and import failures are returned as typed results and
        leave the collection exactly as it was. Operations on an unknown
        entry ID are no-ops.
    """

    def __init__(
        self,
        storage: SnapshotStorage,
        *,
        clock: Clock = utc_now,
        id_generator: IdGenerator = generate_entry_id,
        resolver: Resolver = resolve,
    ) -> None:
        """Initialize the store and load any persisted entries.

        Args:
            storage: Slot holding the serialized collection.
            clock: Function returning the current datetime (enables testing).
            id_generator: Function generating entry IDs.
            resolver: Link resolver used by `add`.
        """
        self._storage = storage
        self._clock = clock
        self._id_generator = id_generator
        self._resolver = resolver
        self._entries: list[PlaylistEntry] = self._load()

    # -------------------------------------------------------------------------
    # Public API: Reading
    # -------------------------------------------------------------------------

    @property
    def entries(self) -> tuple[PlaylistEntry, ...]:
        """All entries, newest first."""
        return tuple(self._entries)

    def get(self, entry_id: str) -> PlaylistEntry | None:
        if (index := self._index_of(entry_id)) is None:
            return None
        return self._entries[index]

    def filter(self, tag: EntryFilter | str = EntryFilter.ALL) -> list[PlaylistEntry]:
        """Return the entries matching a filter tag, in collection order.

        Args:
            tag: One of all, favorites, youtube, spotify.

        Returns:
            A new list; changing it does not affect the collection.

        Raises:
            ValueError: If tag is not a known filter.
        """
        match EntryFilter(tag):
            case EntryFilter.FAVORITES:
                return [e for e in self._entries if e.favorite]
            case EntryFilter.YOUTUBE:
                return [e for e in self._entries if e.provider is Provider.YOUTUBE]
            case EntryFilter.SPOTIFY:
                return [e for e in self._entries if e.provider is Provider.SPOTIFY]
            case EntryFilter.ALL:
                return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PlaylistEntry]:
        return iter(tuple(self._entries))

    def __contains__(self, entry_id: object) -> bool:
        return isinstance(entry_id, str) and self._index_of(entry_id) is not None

    # -------------------------------------------------------------------------
    # Public API: Mutations
    # -------------------------------------------------------------------------

    def add(
        self, raw_url: str, display_name: str = "", note: str = ""
    ) -> PlaylistEntry | ResolutionFailure:
        """Resolve a pasted link and prepend a new entry for it.

        The URL, name and note are stripped of surrounding whitespace.

        Args:
            raw_url: Link as pasted by the user.
            display_name: Optional title; blank entries display as "Untitled".
            note: Optional personal note.

        Returns:
            The new entry, or the ResolutionFailure if the link was rejected
            (in which case the collection is unchanged).
        """
        source_url = raw_url.strip()
        result = self._resolver(source_url)
        if isinstance(result, ResolutionFailure):
            logger.debug("Rejected link %r: %s", raw_url, result.kind)
            return result

        entry = PlaylistEntry.create(
            entry_id=self._new_id(),
            source_url=source_url,
            reference=result,
            created_at=self._clock(),
            display_name=display_name.strip(),
            note=note.strip(),
        )
        self._entries.insert(0, entry)
        logger.info(
            "Added %s entry %s (%s)", entry.provider.label, entry.id, entry.external_id
        )
        self._persist()
        return entry

    def remove(self, entry_id: str) -> bool:
        """Delete an entry.

        Returns:
            True if removed, False if no entry has this ID.
        """
        if (index := self._index_of(entry_id)) is None:
            return False
        del self._entries[index]
        logger.info("Removed entry %s", entry_id)
        self._persist()
        return True

    def toggle_favorite(self, entry_id: str) -> PlaylistEntry | None:
        """Flip the favorite flag.

        Returns:
            The updated entry, or None if not found.
        """
        if (entry := self.get(entry_id)) is None:
            return None
        return self._update(entry_id, favorite=not entry.favorite)

    def update_note(self, entry_id: str, note: str) -> PlaylistEntry | None:
        """Replace the note. Returns the updated entry, or None if not found."""
        return self._update(entry_id, note=note)

    def update_name(self, entry_id: str, name: str) -> PlaylistEntry | None:
        """Replace the display name. Returns the updated entry, or None if not found."""
        return self._update(entry_id, display_name=name)

    # -------------------------------------------------------------------------
    # Public API: Snapshots
    # -------------------------------------------------------------------------

    def export_snapshot(self) -> str:
        """Serialize every entry, in collection order, as a JSON array."""
        return encode_snapshot(self._entries)

    def import_snapshot(self, data: str | bytes) -> ImportResult:
        """Replace the whole collection with an imported snapshot.

        There is no merge and no de-duplication against current entries.

        Args:
            data: Snapshot text or UTF-8 bytes, as produced by `export_snapshot`.

        Returns:
            ImportSuccess with the new entry count, or ImportFailure (kind
            INVALID_FORMAT) if the data was rejected. On failure the current
            collection is untouched.
        """
        try:
            entries = decode_snapshot(data)
        except SnapshotFormatError as e:
            logger.warning("Import rejected: %s", e.message)
            return ImportFailure(detail=e.message)

        self._entries = entries
        logger.info("Imported %d entries", len(entries))
        self._persist()
        return ImportSuccess(count=len(entries))

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _index_of(self, entry_id: str) -> int | None:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def _new_id(self) -> str:
        entry_id = self._id_generator()
        while entry_id in self:
            entry_id = self._id_generator()
        return entry_id

    def _update(self, entry_id: str, **changes: object) -> PlaylistEntry | None:
        """Replace one entry with a copy carrying the given mutable fields."""
        if (index := self._index_of(entry_id)) is None:
            return None
        updated = self._entries[index].model_copy(update=changes)
        self._entries[index] = updated
        logger.debug("Updated entry %s: %s", entry_id, ", ".join(changes))
        self._persist()
        return updated

    def _load(self) -> list[PlaylistEntry]:
        try:
            data = self._storage.load()
        except StorageUnavailableError as e:
            logger.warning("Starting with an empty playlist: %s", e.message)
            return []
        if data is None:
            return []
        try:
            entries = decode_snapshot(data)
        except SnapshotFormatError as e:
            logger.warning("Ignoring unreadable saved playlist: %s", e.message)
            return []
        logger.debug("Loaded %d entries", len(entries))
        return entries

    def _persist(self) -> None:
        try:
            self._storage.save(self.export_snapshot())
        except StorageUnavailableError as e:
            logger.warning("Playlist change not saved: %s", e.message)
