"""Tests for environment-based settings."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from mixtape.settings import Settings, get_settings
from mixtape.storage import STORAGE_KEY
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def isolated_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Run each test away from any real .env file or MIXTAPE_ variables."""
    for name in ("MIXTAPE_DATA_DIR", "MIXTAPE_STORAGE_KEY", "MIXTAPE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Defaults point at the per-user data directory."""
        settings = Settings()
        assert settings.data_dir == Path.home() / ".local" / "share" / "mixtape"
        assert settings.storage_key == STORAGE_KEY
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """MIXTAPE_ variables override the defaults."""
        monkeypatch.setenv("MIXTAPE_DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setenv("MIXTAPE_STORAGE_KEY", "mixtape_entries_v2")
        monkeypatch.setenv("MIXTAPE_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.data_dir == tmp_path / "data"
        assert settings.storage_key == "mixtape_entries_v2"
        assert settings.log_level == "DEBUG"

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        """A .env file in the working directory is honored."""
        (tmp_path / ".env").write_text("MIXTAPE_LOG_LEVEL=info\n")
        assert Settings().log_level == "INFO"

    def test_expands_home_in_data_dir(self) -> None:
        """A leading ~ in the data directory is expanded."""
        settings = Settings(data_dir=Path("~/playlists"))
        assert settings.data_dir == Path.home() / "playlists"

    def test_snapshot_path(self, tmp_path: Path) -> None:
        """The snapshot file lives in the data directory under the storage key."""
        settings = Settings(data_dir=tmp_path, storage_key="custom_v7")
        assert settings.snapshot_path == tmp_path / "custom_v7.json"

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("MIXTAPE_STORAGE_KEY", "unversioned"),
            ("MIXTAPE_LOG_LEVEL", "chatty"),
        ],
    )
    def test_rejects_invalid_values(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        """Invalid configuration fails validation."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Tests for get_settings."""

    def test_is_cached(self) -> None:
        """Settings are loaded once per process."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Clearing the cache picks up new environment values."""
        assert get_settings().log_level == "WARNING"
        monkeypatch.setenv("MIXTAPE_LOG_LEVEL", "ERROR")
        get_settings.cache_clear()
        assert get_settings().log_level == "ERROR"
