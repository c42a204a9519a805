"""Parsing and resolution of single byte-range requests."""

import re
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Dict, Mapping, Optional, Tuple

from common.constants import (
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_RANGE,
    HEADER_RANGE,
    RANGE_UNIT_BYTES,
)
from responder.exceptions import MalformedRangeError, NoRangeHeaderError

# Only the first range expression of a multi-range header is matched.
RANGE_PATTERN = re.compile(r'bytes=\s*(?P<start>\d+)-(?P<end>\d*)', re.IGNORECASE)


def parse_range_header(header: str) -> Tuple[int, Optional[int]]:
    """
    Parse a Range header value.

    Args:
        header: Raw header value (e.g., "bytes=0-499" or "bytes=500-")

    Returns:
        Tuple of (start, end); end is None when the header leaves it open

    Raises:
        MalformedRangeError: If the value does not contain bytes=<start>-<end>
    """
    match = RANGE_PATTERN.search(header or "")
    if not match:
        raise MalformedRangeError(header)

    start = int(match.group('start'))
    end = int(match.group('end')) if match.group('end') else None
    return start, end


def is_range_request(headers: Mapping[str, str]) -> bool:
    return headers.get(HEADER_RANGE) is not None


@dataclass(frozen=True)
class RangeResolution:
    """
    Status and headers describing a resolved range request.
    """
    status_code: int
    headers: Dict[str, str]
    start: int
    end: int

    @property
    def satisfiable(self) -> bool:
        return self.status_code == HTTPStatus.PARTIAL_CONTENT


@dataclass(frozen=True)
class RangeSpec:
    """
    A requested inclusive byte range against a payload of ``total`` bytes.

    ``end`` defaults to the last byte of the payload when the request leaves
    it open.
    """
    total: int
    start: int
    end: Optional[int] = field(default=None)

    def __post_init__(self):
        if self.end is None:
            object.__setattr__(self, 'end', self.total - 1)

    @classmethod
    def from_header(cls, header: str, total: int) -> "RangeSpec":
        start, end = parse_range_header(header)
        return cls(total=total, start=start, end=end)

    @classmethod
    def from_request(cls, headers: Mapping[str, str], total: int) -> "RangeSpec":
        """
        Build a range from request headers.

        Raises:
            NoRangeHeaderError: If the request has no Range header
            MalformedRangeError: If the Range header cannot be parsed
        """
        if not is_range_request(headers):
            raise NoRangeHeaderError()
        return cls.from_header(headers.get(HEADER_RANGE), total)

    @property
    def is_satisfiable(self) -> bool:
        # Only the start offset is checked; a reversed range still passes.
        return self.start <= self.total

    @property
    def content_range(self) -> str:
        return f"{RANGE_UNIT_BYTES} {self.start}-{self.end}/{self.total}"

    @property
    def content_length(self) -> int:
        return self.end - self.start + 1

    def resolve(self) -> RangeResolution:
        """
        Compute the response status and headers for this range.

        Returns:
            206 with Content-Range and a recomputed Content-Length when the
            range is satisfiable, otherwise 416 with "bytes */<total>"
        """
        if self.is_satisfiable:
            return RangeResolution(
                status_code=int(HTTPStatus.PARTIAL_CONTENT),
                headers={
                    HEADER_CONTENT_RANGE: self.content_range,
                    HEADER_CONTENT_LENGTH: str(self.content_length),
                },
                start=self.start,
                end=self.end,
            )

        return RangeResolution(
            status_code=int(HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE),
            headers={HEADER_CONTENT_RANGE: f"{RANGE_UNIT_BYTES} */{self.total}"},
            start=self.start,
            end=self.end,
        )
