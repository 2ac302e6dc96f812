"""Snapshot codec: the whole collection as a UTF-8 JSON array.

The same format is used for write-through persistence and for
user-initiated export/import, so anything exported can be imported back
and anything persisted can be exported as-is.
"""

import json
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from mixtape.exceptions import SnapshotFormatError
from mixtape.models.entry import PlaylistEntry

_ENTRIES = TypeAdapter(list[PlaylistEntry])


def encode_snapshot(entries: Iterable[PlaylistEntry]) -> str:
    """Serialize entries in order, including every entry field.

    ``subtype`` is omitted for entries that have none.

    Args:
        entries: Entries in collection order (newest first).

    Returns:
        Pretty-printed JSON array.
    """
    payload = _ENTRIES.dump_json(
        list(entries), indent=2, by_alias=True, exclude_none=True
    )
    return payload.decode("utf-8")


def decode_snapshot(data: str | bytes) -> list[PlaylistEntry]:
    """Parse a snapshot back into entries, preserving order.

    Missing optional fields (``displayName``, ``note``, ``favorite``,
    ``subtype``) take their defaults. Stored ``embedUrl`` and ``titleHint``
    values are ignored; they are always derived from the reference fields.

    Args:
        data: JSON text, or UTF-8 bytes (a leading BOM is tolerated).

    Returns:
        Entries in snapshot order.

    Raises:
        SnapshotFormatError: If the data is not valid JSON, is not an array,
            contains a record that is not entry-shaped, or repeats an ID.
    """
    try:
        text = data.decode("utf-8-sig") if isinstance(data, bytes) else data
        raw = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SnapshotFormatError(f"not valid JSON ({e})") from e
    except RecursionError as e:
        raise SnapshotFormatError("not valid JSON (nested too deeply)") from e

    if not isinstance(raw, list):
        raise SnapshotFormatError(
            f"expected a list of entries, got {type(raw).__name__}"
        )

    try:
        entries = _ENTRIES.validate_python(raw)
    except ValidationError as e:
        raise SnapshotFormatError(
            f"{e.error_count()} invalid field(s) in entries"
        ) from e

    seen: set[str] = set()
    for entry in entries:
        if entry.id in seen:
            raise SnapshotFormatError(f"duplicate entry ID '{entry.id}'")
        seen.add(entry.id)
    return entries
