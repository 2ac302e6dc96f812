"""Test fixtures and configuration for mixtape tests.

This module provides shared fixtures organized into:
- Time and ID utilities: Deterministic clock and ID generator
- Store fixtures: PlaylistStore backed by in-memory storage
- Factory fixtures: Builders for entries
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from mixtape.models import PlaylistEntry, Provider, SpotifyKind
from mixtape.storage import MemoryStorage
from mixtape.store import PlaylistStore

YOUTUBE_URL = "https://youtu.be/dQw4w9WgXcQ"
YOUTUBE_ID = "dQw4w9WgXcQ"
SPOTIFY_URL = "https://open.spotify.com/album/1DFixLWuPkv3KT3TnV35m3"
SPOTIFY_ID = "1DFixLWuPkv3KT3TnV35m3"


# =============================================================================
# Time and ID Utilities
# =============================================================================


class MockClock:
    """Mock clock for deterministic time-based testing.

    Usage:
        clock = MockClock()
        clock.advance(60)  # Advance by 60 seconds
    """

    def __init__(self, initial: datetime | None = None) -> None:
        self._time = initial or datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self._time

    def advance(self, seconds: int) -> None:
        """Advance the clock by the specified seconds."""
        self._time += timedelta(seconds=seconds)


class MockIdGenerator:
    """Mock ID generator for deterministic ID generation.

    Usage:
        gen = MockIdGenerator()
        gen()  # Returns "entry-0001"
        gen()  # Returns "entry-0002"
    """

    def __init__(self, prefix: str = "entry") -> None:
        self._counter = 0
        self._prefix = prefix

    def __call__(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter:04d}"


@pytest.fixture
def clock() -> MockClock:
    """Provide a mock clock."""
    return MockClock()


@pytest.fixture
def id_generator() -> MockIdGenerator:
    """Provide a mock ID generator."""
    return MockIdGenerator()


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def storage() -> MemoryStorage:
    """Provide empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store(
    storage: MemoryStorage, clock: MockClock, id_generator: MockIdGenerator
) -> PlaylistStore:
    """Provide an empty store with deterministic clock and IDs."""
    return PlaylistStore(storage, clock=clock, id_generator=id_generator)


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def make_entry() -> Callable[..., PlaylistEntry]:
    """Factory for creating entries with sensible defaults."""

    def _make(**overrides: Any) -> PlaylistEntry:
        data: dict[str, Any] = {
            "id": "entry-0001",
            "source_url": YOUTUBE_URL,
            "provider": Provider.YOUTUBE,
            "external_id": YOUTUBE_ID,
            "created_at": datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC),
        }
        data.update(overrides)
        return PlaylistEntry(**data)

    return _make


@pytest.fixture
def spotify_entry(make_entry: Callable[..., PlaylistEntry]) -> PlaylistEntry:
    """A Spotify album entry."""
    return make_entry(
        id="entry-spotify",
        source_url=SPOTIFY_URL,
        provider=Provider.SPOTIFY,
        subtype=SpotifyKind.ALBUM,
        external_id=SPOTIFY_ID,
        display_name="Summer",
    )
