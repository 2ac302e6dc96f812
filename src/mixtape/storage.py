"""Persistence adapters for the serialized collection.

A storage adapter holds one logical slot: the whole snapshot under a fixed,
versioned key. If the snapshot format ever changes, a new key version is
introduced instead of rewriting old data in place.
"""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path
from typing import Protocol

from mixtape.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

STORAGE_KEY = "mixtape_entries_v1"

_VERSIONED_KEY_PATTERN = re.compile(r"[A-Za-z0-9_.-]+_v\d+")


def validate_storage_key(key: str) -> str:
    """Ensure a storage key is filesystem-safe and carries a version suffix.

    Raises:
        ValueError: If the key is not of the form ``<name>_v<N>``.
    """
    if not _VERSIONED_KEY_PATTERN.fullmatch(key):
        raise ValueError(f"Storage key must look like 'name_v1', got {key!r}")
    return key


class SnapshotStorage(Protocol):
    """Key-value slot holding the serialized collection.

    Implementations raise StorageUnavailableError on I/O failure. Callers
    decide whether that is fatal; the playlist store treats it as
    best-effort.
    """

    def load(self) -> str | None:
        """Return the stored snapshot, or None if nothing was saved yet."""
        ...

    def save(self, data: str) -> None:
        """Replace the stored snapshot."""
        ...


class MemoryStorage:
    """In-process storage, for tests and throwaway sessions."""

    def __init__(self, data: str | None = None) -> None:
        self.data = data
        self.save_count = 0

    def load(self) -> str | None:
        return self.data

    def save(self, data: str) -> None:
        self.data = data
        self.save_count += 1


class JsonFileStorage:
    """Snapshot stored as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a crash mid-write never leaves a truncated snapshot.

    Usage::

        storage = JsonFileStorage(Path("~/.local/share/mixtape").expanduser())
        storage.save(encode_snapshot(entries))
        data = storage.load()
    """

    def __init__(self, directory: Path, key: str = STORAGE_KEY) -> None:
        self._directory = directory
        self._key = validate_storage_key(key)

    @property
    def path(self) -> Path:
        return self._directory / f"{self._key}.json"

    def load(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnavailableError(
                f"Failed to read snapshot from {self.path}: {e}"
            ) from e

    def save(self, data: str) -> None:
        tmp_path: Path | None = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._directory,
                prefix=f".{self._key}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                f.write(data)
            tmp_path.replace(self.path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageUnavailableError(
                f"Failed to write snapshot to {self.path}: {e}"
            ) from e
        logger.debug("Snapshot saved to %s (%d bytes)", self.path, len(data))
