"""Tests for storage adapters."""

from pathlib import Path

import pytest
from mixtape.exceptions import StorageUnavailableError
from mixtape.storage import (
    STORAGE_KEY,
    JsonFileStorage,
    MemoryStorage,
    validate_storage_key,
)


class TestValidateStorageKey:
    """Tests for versioned storage keys."""

    @pytest.mark.parametrize("key", [STORAGE_KEY, "mixtape_entries_v2", "a.b-c_v10"])
    def test_accepts_versioned_keys(self, key: str) -> None:
        """Keys ending in _v<N> are accepted unchanged."""
        assert validate_storage_key(key) == key

    @pytest.mark.parametrize(
        "key", ["mixtape_entries", "entries_v", "../escape_v1", "with space_v1", ""]
    )
    def test_rejects_unversioned_or_unsafe_keys(self, key: str) -> None:
        """Keys without a version suffix or with path characters are rejected."""
        with pytest.raises(ValueError, match="Storage key"):
            validate_storage_key(key)


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_starts_empty(self) -> None:
        """Nothing is stored until the first save."""
        assert MemoryStorage().load() is None

    def test_save_then_load(self) -> None:
        """Saved data is returned by load and saves are counted."""
        storage = MemoryStorage()
        storage.save("[]")
        assert storage.load() == "[]"
        assert storage.save_count == 1


class TestJsonFileStorage:
    """Tests for JsonFileStorage."""

    def test_path_uses_key(self, tmp_path: Path) -> None:
        """The snapshot file is named after the storage key."""
        storage = JsonFileStorage(tmp_path, "custom_v3")
        assert storage.path == tmp_path / "custom_v3.json"

    def test_load_missing_file_returns_none(self, tmp_path: Path) -> None:
        """A fresh directory has no snapshot."""
        assert JsonFileStorage(tmp_path).load() is None

    def test_save_creates_directory(self, tmp_path: Path) -> None:
        """Saving creates missing parent directories."""
        storage = JsonFileStorage(tmp_path / "nested" / "dir")
        storage.save('[{"note": "für dich"}]')
        assert storage.load() == '[{"note": "für dich"}]'
        assert storage.path.read_text(encoding="utf-8") == '[{"note": "für dich"}]'

    def test_save_replaces_previous_snapshot(self, tmp_path: Path) -> None:
        """Each save overwrites the whole slot."""
        storage = JsonFileStorage(tmp_path)
        storage.save("[1]")
        storage.save("[2]")
        assert storage.load() == "[2]"

    def test_save_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """Temporary files are renamed into place."""
        storage = JsonFileStorage(tmp_path)
        storage.save("[]")
        assert [p.name for p in tmp_path.iterdir()] == [f"{STORAGE_KEY}.json"]

    def test_save_failure_raises_storage_unavailable(self, tmp_path: Path) -> None:
        """I/O errors surface as StorageUnavailableError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        storage = JsonFileStorage(blocker / "sub")
        with pytest.raises(StorageUnavailableError, match="Failed to write"):
            storage.save("[]")

    def test_load_failure_raises_storage_unavailable(self, tmp_path: Path) -> None:
        """Undecodable files surface as StorageUnavailableError."""
        storage = JsonFileStorage(tmp_path)
        storage.path.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(StorageUnavailableError, match="Failed to read"):
            storage.load()

    def test_unreadable_path_raises_storage_unavailable(self, tmp_path: Path) -> None:
        """A snapshot path that is a directory cannot be read."""
        storage = JsonFileStorage(tmp_path)
        storage.path.mkdir()
        with pytest.raises(StorageUnavailableError, match="Failed to read"):
            storage.load()

    def test_name_too_long_raises_storage_unavailable(self, tmp_path: Path) -> None:
        """OS errors other than a missing file are not treated as empty."""
        storage = JsonFileStorage(tmp_path, "a" * 300 + "_v1")
        with pytest.raises(StorageUnavailableError, match="Failed to read"):
            storage.load()

    def test_rejects_unversioned_key(self, tmp_path: Path) -> None:
        """Storage keys must be versioned."""
        with pytest.raises(ValueError):
            JsonFileStorage(tmp_path, "entries")
