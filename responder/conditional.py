"""Conditional request negotiation and cache header strategies."""

import logging
from typing import Dict, Mapping

from common.constants import (
    HEADER_CACHE_CONTROL,
    HEADER_ETAG,
    HEADER_EXPIRES,
    HEADER_IF_MODIFIED_SINCE,
    HEADER_IF_NONE_MATCH,
    HEADER_PRAGMA,
)
from responder.types import Validators
from responder.validators import parse_http_date

logger = logging.getLogger(__name__)


class CacheValidation:
    """
    Cache validation for responders with caching enabled.

    Supplies Cache-Control and ETag headers for served files, cache
    prevention headers for not-found responses, and decides whether a
    conditional request is already satisfied by the client's copy.
    """

    enabled = True

    def __init__(self, public: bool = True, max_age: int = 600):
        self.public = public
        self.max_age = max_age

    def cache_headers(self) -> Dict[str, str]:
        visibility = "public" if self.public else "private"
        return {HEADER_CACHE_CONTROL: f"{visibility}, max-age={self.max_age}"}

    def validator_headers(self, validators: Validators) -> Dict[str, str]:
        return {HEADER_ETAG: validators.quoted_etag}

    def prevention_headers(self) -> Dict[str, str]:
        return {
            HEADER_CACHE_CONTROL: "no-store, no-cache, must-revalidate",
            HEADER_PRAGMA: "no-cache",
            HEADER_EXPIRES: "0",
        }

    def is_not_modified(self, headers: Mapping[str, str], validators: Validators) -> bool:
        """
        Decide whether the client's cached copy is still current.

        Args:
            headers: Case-insensitive request headers
            validators: Validators derived from the served file

        Returns:
            True if If-None-Match lists the ETag, or If-Modified-Since is at
            or after the file's last modification
        """
        none_match = headers.get(HEADER_IF_NONE_MATCH)
        if none_match and self._etag_matches(none_match, validators.quoted_etag):
            logger.debug(f"If-None-Match {none_match} matches {validators.quoted_etag}")
            return True

        modified_since = parse_http_date(headers.get(HEADER_IF_MODIFIED_SINCE))
        if modified_since is not None:
            last_modified = parse_http_date(validators.last_modified)
            if last_modified is not None and modified_since >= last_modified:
                logger.debug(
                    f"If-Modified-Since {modified_since} not before last modification {last_modified}"
                )
                return True

        return False

    @staticmethod
    def _etag_matches(header: str, quoted_etag: str) -> bool:
        candidates = [candidate.strip() for candidate in header.split(',')]
        return "*" in candidates or quoted_etag in candidates


class NoCacheValidation:
    """
    Stand-in for responders with caching disabled: never adds cache headers
    and never reports a request as not modified.
    """

    enabled = False

    def cache_headers(self) -> Dict[str, str]:
        return {}

    def validator_headers(self, validators: Validators) -> Dict[str, str]:
        return {}

    def prevention_headers(self) -> Dict[str, str]:
        return {}

    def is_not_modified(self, headers: Mapping[str, str], validators: Validators) -> bool:
        return False


def select_cache_strategy(enabled: bool, public: bool = True, max_age: int = 600):
    """
    Pick the cache strategy for a responder.

    Args:
        enabled: Whether cache validation is enabled
        public: Cache-Control visibility for the enabled strategy
        max_age: Cache-Control max-age in seconds for the enabled strategy

    Returns:
        CacheValidation when enabled, NoCacheValidation otherwise
    """
    if enabled:
        return CacheValidation(public=public, max_age=max_age)
    return NoCacheValidation()
