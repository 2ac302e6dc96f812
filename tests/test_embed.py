"""Tests for iframe markup."""

from collections.abc import Callable

from mixtape.embed import IFRAME_ALLOW, embed_html
from mixtape.models import MediaReference, PlaylistEntry, Provider, SpotifyKind


class TestEmbedHtml:
    """Tests for embed_html."""

    def test_youtube_entry(self, make_entry: Callable[..., PlaylistEntry]) -> None:
        """The query string ampersand is escaped inside the src attribute."""
        html = embed_html(make_entry())
        assert html == (
            '<iframe src="https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ'
            '?rel=0&amp;modestbranding=1" '
            'title="YouTube video" '
            f'allow="{IFRAME_ALLOW}" '
            'loading="lazy"></iframe>'
        )

    def test_spotify_reference(self) -> None:
        """Resolved references render without being stored."""
        ref = MediaReference(
            provider=Provider.SPOTIFY,
            external_id="4uLU6hMCjMI75M1A2tKUQC",
            subtype=SpotifyKind.TRACK,
        )
        html = embed_html(ref)
        assert 'src="https://open.spotify.com/embed/track/4uLU6hMCjMI75M1A2tKUQC"' in html
        assert 'title="Spotify track"' in html

    def test_allows_fullscreen_and_encrypted_media(self) -> None:
        """Players need these permissions to work inside the frame."""
        assert "fullscreen" in IFRAME_ALLOW
        assert "encrypted-media" in IFRAME_ALLOW
