"""Derivation of content metadata and cache validators from a file."""

import hashlib
import mimetypes
from email.utils import formatdate, mktime_tz, parsedate_tz
from typing import Dict, Optional

from common.constants import (
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
)
from responder.types import Validators


def format_http_date(timestamp: int) -> str:
    """
    Format an epoch timestamp as an HTTP date.

    Args:
        timestamp: Seconds since the epoch

    Returns:
        Date string like "Tue, 15 Nov 1994 08:12:31 GMT", always in GMT
    """
    return formatdate(timestamp, usegmt=True)


def parse_http_date(value: Optional[str]) -> Optional[int]:
    """
    Parse an HTTP date header value.

    Args:
        value: Raw header value

    Returns:
        Seconds since the epoch, or None if the value cannot be parsed
    """
    if not value:
        return None
    parsed = parsedate_tz(value.strip())
    if parsed is None:
        return None
    try:
        return int(mktime_tz(parsed))
    except (OverflowError, ValueError):
        return None


def guess_content_type(file) -> Optional[str]:
    """Guess the MIME type from the file name's extension; the content is not inspected."""
    content_type, _ = mimetypes.guess_type(file.name)
    return content_type


def basic_headers(file) -> Dict[str, str]:
    """
    Build the length and type headers for a file.

    Content-Type is left out entirely when it cannot be determined.

    Args:
        file: File descriptor exposing ``name`` and ``size``

    Returns:
        Header mapping with Content-Length and, when known, Content-Type
    """
    headers = {HEADER_CONTENT_LENGTH: str(file.size)}
    content_type = guess_content_type(file)
    if content_type:
        headers[HEADER_CONTENT_TYPE] = content_type
    return headers


def generate_etag(file) -> str:
    """
    Generate an opaque entity tag from a file's modification time and path.

    Two files with the same bytes get different tags when their paths or
    modification times differ.
    """
    return hashlib.md5(f"{file.mtime}{file.path}".encode('utf-8')).hexdigest()


def derive_validators(file) -> Validators:
    return Validators(
        last_modified=format_http_date(file.mtime),
        etag=generate_etag(file),
    )
