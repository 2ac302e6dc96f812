"""HTML embed markup for playlist entries."""

from html import escape

from mixtape.models.entry import PlaylistEntry
from mixtape.models.media import MediaReference

IFRAME_ALLOW = (
    "autoplay; clipboard-write; encrypted-media; fullscreen; picture-in-picture"
)


def embed_html(item: PlaylistEntry | MediaReference) -> str:
    """Render a lazy-loading iframe for an entry or a resolved reference.

    Attribute values are HTML-escaped, so the ``&`` in YouTube embed URLs
    is written as ``&amp;``.
    """
    return (
        f'<iframe src="{escape(item.embed_url)}" '
        f'title="{escape(item.title_hint)}" '
        f'allow="{IFRAME_ALLOW}" '
        'loading="lazy"></iframe>'
    )
