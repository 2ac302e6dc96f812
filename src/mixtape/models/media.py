"""Resolved media references and the embed URL templates they derive from."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from mixtape.models.enums import Provider, SpotifyKind

YOUTUBE_EMBED_TEMPLATE = (
    "https://www.youtube-nocookie.com/embed/{id}?rel=0&modestbranding=1"
)
SPOTIFY_EMBED_TEMPLATE = "https://open.spotify.com/embed/{kind}/{id}"


def embed_url_for(
    provider: Provider, external_id: str, subtype: SpotifyKind | None = None
) -> str:
    """Build the privacy-respecting embed URL for a media reference.

    This is the only place embed URLs are derived. Entries never store
    one independently.

    Args:
        provider: Media provider.
        external_id: Provider-specific content ID.
        subtype: Spotify content type. Required for Spotify, ignored otherwise.

    Returns:
        Fully-qualified embed URL.

    Raises:
        ValueError: If a Spotify reference has no subtype.

    Example:
        >>> embed_url_for(Provider.SPOTIFY, "4uLU6hMCjMI75M1A2tKUQC", SpotifyKind.TRACK)
        'https://open.spotify.com/embed/track/4uLU6hMCjMI75M1A2tKUQC'
    """
    match provider:
        case Provider.YOUTUBE:
            return YOUTUBE_EMBED_TEMPLATE.format(id=external_id)
        case Provider.SPOTIFY:
            if subtype is None:
                raise ValueError("Spotify references require a subtype")
            return SPOTIFY_EMBED_TEMPLATE.format(kind=subtype.value, id=external_id)


def title_hint_for(provider: Provider, subtype: SpotifyKind | None = None) -> str:
    """Fallback label shown when the user gave no title."""
    match provider:
        case Provider.YOUTUBE:
            return "YouTube video"
        case Provider.SPOTIFY:
            return f"Spotify {subtype.value if subtype else 'media'}"


class MediaReference(BaseModel):
    """Canonical, embeddable reference produced by link resolution.

    Attributes:
        provider: Media provider the link belongs to.
        external_id: Provider-specific content ID.
        subtype: Spotify content type; always None for YouTube.
        embed_url: Derived embed URL (read-only).
        title_hint: Derived fallback label (read-only).
    """

    model_config = ConfigDict(frozen=True)

    provider: Provider
    external_id: str = Field(min_length=1)
    subtype: SpotifyKind | None = None

    @model_validator(mode="after")
    def subtype_matches_provider(self) -> MediaReference:
        """Spotify references carry a subtype, YouTube references never do."""
        if self.provider is Provider.SPOTIFY and self.subtype is None:
            raise ValueError("Spotify references require a subtype")
        if self.provider is Provider.YOUTUBE and self.subtype is not None:
            raise ValueError("YouTube references do not have a subtype")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def embed_url(self) -> str:
        return embed_url_for(self.provider, self.external_id, self.subtype)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title_hint(self) -> str:
        return title_hint_for(self.provider, self.subtype)
