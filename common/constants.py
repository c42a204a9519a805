"""Project-wide constants (header names, range unit, streaming sizes)."""

HEADER_ACCEPT_RANGES = "Accept-Ranges"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_RANGE = "Content-Range"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ETAG = "ETag"
HEADER_EXPIRES = "Expires"
HEADER_IF_MODIFIED_SINCE = "If-Modified-Since"
HEADER_IF_NONE_MATCH = "If-None-Match"
HEADER_LAST_MODIFIED = "Last-Modified"
HEADER_PRAGMA = "Pragma"
HEADER_RANGE = "Range"

RANGE_UNIT_BYTES = "bytes"

STREAM_PIECE_SIZE_BYTES: int = 64 * 1024  # 64 KiB per streamed piece
