"""Value types produced by the file responder."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class OutcomeKind(str, Enum):
    """
    Closed set of decisions the responder can reach for a request.
    """
    NOT_FOUND = "not_found"
    NOT_MODIFIED = "not_modified"
    FULL = "full"
    PARTIAL = "partial"
    RANGE_UNSATISFIABLE = "range_unsatisfiable"


@dataclass(frozen=True)
class Validators:
    """
    Cache validators derived from a file's path and modification time.
    """
    last_modified: str
    etag: str

    @property
    def quoted_etag(self) -> str:
        return f'"{self.etag}"'


@dataclass(frozen=True)
class BodyWindow:
    """
    The inclusive byte window of ``file`` a response should carry.

    The responder only declares the window; the I/O side slices and streams it.
    """
    file: Any
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class FileResponseOutcome:
    """
    Status, headers and body a file response should be sent with.

    Each pipeline stage returns a new outcome; headers are copied, never
    shared between stages.
    """
    kind: Optional[OutcomeKind]
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[BodyWindow] = None
    reason_phrase: str = ""

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def has_header(self, name: str) -> bool:
        return self.header(name) is not None

    def with_headers(self, headers: Mapping[str, str]) -> "FileResponseOutcome":
        """Return a copy with ``headers`` set, replacing same-named headers."""
        merged = dict(self.headers)
        for name, value in headers.items():
            for existing in [key for key in merged if key.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
        return replace(self, headers=merged)

    def with_status(
        self,
        kind: OutcomeKind,
        status_code: int,
        reason_phrase: str = ""
    ) -> "FileResponseOutcome":
        return replace(self, kind=kind, status_code=status_code, reason_phrase=reason_phrase)

    def with_body(self, body: BodyWindow) -> "FileResponseOutcome":
        return replace(self, body=body)

    def without_body(self) -> "FileResponseOutcome":
        return replace(self, body=None)
