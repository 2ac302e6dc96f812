"""Typed results for operations that can fail without raising."""

from pydantic import BaseModel, ConfigDict

from mixtape.models.enums import FailureKind
from mixtape.models.media import MediaReference


class ResolutionFailure(BaseModel):
    """A pasted link could not be resolved to a known provider.

    Attributes:
        kind: INVALID_URL or UNSUPPORTED_PROVIDER.
        raw_url: The input exactly as given.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    raw_url: str

    @property
    def message(self) -> str:
        return f"{self.kind.label}: {self.raw_url!r}"


class ImportFailure(BaseModel):
    """Serialized data was rejected; the collection was left untouched.

    Attributes:
        kind: Always INVALID_FORMAT.
        detail: Why the payload was rejected.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind = FailureKind.INVALID_FORMAT
    detail: str = ""

    @property
    def message(self) -> str:
        if self.detail:
            return f"{self.kind.label}: {self.detail}"
        return self.kind.label


class ImportSuccess(BaseModel):
    """The collection was replaced by an imported snapshot."""

    model_config = ConfigDict(frozen=True)

    count: int


type ResolveResult = MediaReference | ResolutionFailure
type ImportResult = ImportSuccess | ImportFailure
