"""Custom exceptions for mixtape.

Resolution and import failures are not exceptions: they are returned as
typed results (see `mixtape.models.results`). The exceptions here cover
storage I/O and errors raised at the command-line boundary.
"""


class MixtapeError(Exception):
    """Base exception for mixtape.

    Attributes:
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StorageUnavailableError(MixtapeError):
    """Persisted snapshot could not be read or written.

    Raised by storage adapters. The playlist store catches it and keeps the
    in-memory collection as the source of truth for the session.
    """


class SnapshotFormatError(MixtapeError):
    """Serialized data is not a sequence of entry-shaped records."""


class EntryNotFoundError(MixtapeError):
    """No entry with the requested ID exists in the collection."""

    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"No entry with ID '{entry_id}'")
