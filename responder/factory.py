"""Construction of file responders from configuration."""

from typing import Optional

from responder import config
from responder.assembler import FileResponder
from responder.conditional import select_cache_strategy


def create_file_responder(
    serve_ranges: Optional[bool] = None,
    cache_enabled: Optional[bool] = None
) -> FileResponder:
    """
    Create a file responder, falling back to the configured defaults.

    Args:
        serve_ranges: Override FILED_SERVE_RANGES
        cache_enabled: Override FILED_CACHE_ENABLED

    Returns:
        FileResponder with the selected cache strategy
    """
    if serve_ranges is None:
        serve_ranges = config.SERVE_RANGES
    if cache_enabled is None:
        cache_enabled = config.CACHE_ENABLED

    cache = select_cache_strategy(
        cache_enabled,
        public=config.CACHE_PUBLIC,
        max_age=config.CACHE_MAX_AGE
    )
    return FileResponder(serve_ranges=serve_ranges, cache=cache)
