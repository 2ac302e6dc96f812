"""Link resolution: classify a pasted URL into a provider reference.

Resolution is pure: no network I/O, no side effects, and the same input
always yields the same result. Providers are tried in the order of
`MATCHERS`, stopping at the first success. YouTube and Spotify hosts are
disjoint, so the order only matters for determinism.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import SplitResult, parse_qs, urlsplit

from mixtape.models.enums import FailureKind, Provider, SpotifyKind
from mixtape.models.media import MediaReference
from mixtape.models.results import ResolutionFailure, ResolveResult

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048

VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{6,}")

# /embed/ID and /shorts/ID on youtube.com hosts
_YOUTUBE_PATH_PATTERN = re.compile(
    r"^/(?:embed|shorts)/([A-Za-z0-9_-]{6,})", re.IGNORECASE
)
# youtu.be/ID
_SHORT_LINK_PATH_PATTERN = re.compile(r"^/([A-Za-z0-9_-]{6,})")
_SPOTIFY_PATH_PATTERN = re.compile(
    r"^/(track|album|playlist|episode|show)/([\w-]+)", re.IGNORECASE | re.ASCII
)

YOUTUBE_HOST = "youtube.com"
YOUTUBE_SHORT_HOST = "youtu.be"
SPOTIFY_HOST = "open.spotify.com"

type Resolver = Callable[[str], ResolveResult]


@dataclass(frozen=True)
class ProviderMatcher:
    """Closed extension point for one provider.

    Attributes:
        provider: Provider this matcher produces references for.
        accepts: Predicate on the parsed URL, typically a host check.
        extract: Builds a reference from an accepted URL, or returns None
            when the path does not have a supported shape.
    """

    provider: Provider
    accepts: Callable[[SplitResult], bool]
    extract: Callable[[SplitResult], MediaReference | None]


def _parse_absolute_url(raw_url: str) -> SplitResult | None:
    """Parse an absolute URL (scheme and host required).

    Returns:
        The split URL, or None if the input is not a well-formed absolute URL.
    """
    candidate = raw_url.strip()
    if not candidate or len(candidate) > MAX_URL_LENGTH:
        return None
    if any(ch.isspace() for ch in candidate):
        return None
    try:
        parsed = urlsplit(candidate)
        # .port raises ValueError for out-of-range or non-numeric ports
        _ = parsed.port
    except ValueError:
        return None
    if not parsed.scheme or not parsed.hostname:
        return None
    return parsed


def _query_video_id(url: SplitResult) -> str | None:
    """Non-empty ``v`` query parameter, if present."""
    values = parse_qs(url.query).get("v")
    return values[0] if values else None


def _is_youtube_host(url: SplitResult) -> bool:
    host = url.hostname or ""
    return (
        host in (YOUTUBE_HOST, YOUTUBE_SHORT_HOST)
        or host.endswith("." + YOUTUBE_HOST)
    )


def _extract_youtube(url: SplitResult) -> MediaReference | None:
    """Extract a video ID from watch, embed, shorts or youtu.be URLs.

    A ``v`` query parameter takes precedence over an ID found in the path,
    so links carrying extra parameters still resolve. It is not checked
    against the path ID.
    """
    query_id = _query_video_id(url)
    if url.hostname == YOUTUBE_SHORT_HOST:
        match = _SHORT_LINK_PATH_PATTERN.match(url.path)
    elif url.path.lower() == "/watch":
        if query_id is None or not VIDEO_ID_PATTERN.fullmatch(query_id):
            return None
        return MediaReference(provider=Provider.YOUTUBE, external_id=query_id)
    else:
        match = _YOUTUBE_PATH_PATTERN.match(url.path)

    if match is None:
        return None
    video_id = query_id or match.group(1)
    return MediaReference(provider=Provider.YOUTUBE, external_id=video_id)


def _is_spotify_host(url: SplitResult) -> bool:
    return url.hostname == SPOTIFY_HOST


def _extract_spotify(url: SplitResult) -> MediaReference | None:
    match = _SPOTIFY_PATH_PATTERN.match(url.path)
    if match is None:
        return None
    kind = SpotifyKind(match.group(1).lower())
    return MediaReference(
        provider=Provider.SPOTIFY, external_id=match.group(2), subtype=kind
    )


MATCHERS: tuple[ProviderMatcher, ...] = (
    ProviderMatcher(Provider.YOUTUBE, _is_youtube_host, _extract_youtube),
    ProviderMatcher(Provider.SPOTIFY, _is_spotify_host, _extract_spotify),
)


def resolve(raw_url: str) -> ResolveResult:
    """Resolve a pasted link to a canonical media reference.

    Supported shapes:
        - ``youtube.com/watch?v=ID``, ``youtube.com/embed/ID``,
          ``youtube.com/shorts/ID`` (any youtube.com subdomain)
        - ``youtu.be/ID``
        - ``open.spotify.com/<track|album|playlist|episode|show>/ID``

    Args:
        raw_url: Untrusted user input. Surrounding whitespace is ignored.

    Returns:
        A MediaReference on success, otherwise a ResolutionFailure with kind
        INVALID_URL (not an absolute URL) or UNSUPPORTED_PROVIDER. Never raises.

    Example:
        >>> resolve("https://youtu.be/dQw4w9WgXcQ").embed_url
        'https://www.youtube-nocookie.com/embed/dQw4w9WgXcQ?rel=0&modestbranding=1'
    """
    url = _parse_absolute_url(raw_url)
    if url is None:
        return ResolutionFailure(kind=FailureKind.INVALID_URL, raw_url=raw_url)

    for matcher in MATCHERS:
        if not matcher.accepts(url):
            continue
        if (reference := matcher.extract(url)) is not None:
            return reference

    return ResolutionFailure(kind=FailureKind.UNSUPPORTED_PROVIDER, raw_url=raw_url)


def is_supported_url(raw_url: str) -> bool:
    """Check whether a link resolves to a supported provider."""
    return isinstance(resolve(raw_url), MediaReference)
