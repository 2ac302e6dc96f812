"""Playlist entry model, the persisted unit of the collection."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from mixtape.models.enums import Provider, SpotifyKind
from mixtape.models.media import MediaReference, embed_url_for, title_hint_for

UNTITLED = "Untitled"


class PlaylistEntry(BaseModel):
    """One curated link with the user's annotations.

    Only `display_name`, `note` and `favorite` change after creation, and
    only through `PlaylistStore`, which replaces the entry with an updated
    copy. `embed_url` and `title_hint` are always derived from the
    reference fields; values found in imported data are ignored.

    Serialized field names are camelCase. Records written by the original
    browser app (``url``, ``type``, ``refId``, ``name``) are also accepted.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    source_url: str = Field(
        validation_alias=AliasChoices("sourceUrl", "source_url", "url"),
        serialization_alias="sourceUrl",
    )
    provider: Provider
    subtype: SpotifyKind | None = Field(
        default=None, validation_alias=AliasChoices("subtype", "type")
    )
    external_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("externalId", "external_id", "refId"),
        serialization_alias="externalId",
    )
    display_name: str = Field(
        default="",
        validation_alias=AliasChoices("displayName", "display_name", "name"),
        serialization_alias="displayName",
    )
    note: str = ""
    favorite: bool = False
    created_at: datetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    @field_validator("display_name", "note", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("subtype", mode="before")
    @classmethod
    def lowercase_subtype(cls, v: Any) -> Any:
        # Older exports kept the type as written in the link, e.g. "Album"
        return v.lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def subtype_matches_provider(self) -> PlaylistEntry:
        """Spotify entries carry a subtype, YouTube entries never do."""
        if self.provider is Provider.SPOTIFY and self.subtype is None:
            raise ValueError("Spotify entries require a subtype")
        if self.provider is Provider.YOUTUBE and self.subtype is not None:
            raise ValueError("YouTube entries do not have a subtype")
        return self

    @classmethod
    def create(
        cls,
        *,
        entry_id: str,
        source_url: str,
        reference: MediaReference,
        created_at: datetime,
        display_name: str = "",
        note: str = "",
    ) -> PlaylistEntry:
        """Build a new, non-favorite entry from a resolved reference."""
        return cls(
            id=entry_id,
            source_url=source_url,
            provider=reference.provider,
            subtype=reference.subtype,
            external_id=reference.external_id,
            display_name=display_name,
            note=note,
            created_at=created_at,
        )

    @computed_field(alias="embedUrl")  # type: ignore[prop-decorator]
    @property
    def embed_url(self) -> str:
        return embed_url_for(self.provider, self.external_id, self.subtype)

    @computed_field(alias="titleHint")  # type: ignore[prop-decorator]
    @property
    def title_hint(self) -> str:
        return title_hint_for(self.provider, self.subtype)

    @property
    def reference(self) -> MediaReference:
        """The immutable media reference this entry was built from."""
        return MediaReference(
            provider=self.provider,
            external_id=self.external_id,
            subtype=self.subtype,
        )

    @property
    def label(self) -> str:
        """Display name, or "Untitled" when blank."""
        return self.display_name if self.display_name.strip() else UNTITLED

    @property
    def provider_label(self) -> str:
        """Provider badge text, e.g. "YouTube" or "Spotify · album"."""
        if self.subtype is not None:
            return f"{self.provider.label} · {self.subtype.value}"
        return self.provider.label
