"""Configuration settings for the file responder."""

import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SERVE_RANGES = _env_flag("FILED_SERVE_RANGES", True)

CACHE_ENABLED = _env_flag("FILED_CACHE_ENABLED", True)

CACHE_MAX_AGE = int(os.environ.get("FILED_CACHE_MAX_AGE", "600"))

CACHE_PUBLIC = _env_flag("FILED_CACHE_PUBLIC", True)
