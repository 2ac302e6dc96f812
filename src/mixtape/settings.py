"""Application settings using pydantic-settings."""

from functools import cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import AfterValidator, BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mixtape.storage import STORAGE_KEY, validate_storage_key

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]

StorageKey = Annotated[str, AfterValidator(validate_storage_key)]
DataDir = Annotated[Path, AfterValidator(Path.expanduser)]


def _default_data_dir() -> Path:
    return Path.home() / ".local" / "share" / "mixtape"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MIXTAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: DataDir = Field(
        default_factory=_default_data_dir,
        description="Directory holding the persisted playlist",
    )
    storage_key: StorageKey = Field(
        default=STORAGE_KEY,
        description="Versioned name of the persisted snapshot slot",
    )
    log_level: LogLevel = Field(default="WARNING", description="Log level")

    @property
    def snapshot_path(self) -> Path:
        return self.data_dir / f"{self.storage_key}.json"


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
