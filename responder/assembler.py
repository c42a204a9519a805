"""File responder: decides status, headers and body window for a file request."""

import logging
from http import HTTPStatus
from typing import Any, Mapping, Optional

from common.constants import HEADER_ACCEPT_RANGES, HEADER_LAST_MODIFIED, RANGE_UNIT_BYTES
from responder.conditional import CacheValidation
from responder.headers import request_headers
from responder.ranges import RangeSpec, is_range_request
from responder.types import BodyWindow, FileResponseOutcome, OutcomeKind, Validators
from responder.validators import basic_headers, derive_validators, format_http_date

logger = logging.getLogger(__name__)

_KIND_BY_STATUS = {
    HTTPStatus.OK: OutcomeKind.FULL,
    HTTPStatus.PARTIAL_CONTENT: OutcomeKind.PARTIAL,
    HTTPStatus.NOT_MODIFIED: OutcomeKind.NOT_MODIFIED,
    HTTPStatus.NOT_FOUND: OutcomeKind.NOT_FOUND,
    HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE: OutcomeKind.RANGE_UNSATISFIABLE,
}


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class FileResponder:
    """
    Builds the response outcome for a single file and optional request.

    The sequence is fixed: existence check, metadata headers, conditional
    short-circuit, full body, then range negotiation. Each step returns a new
    outcome, and later steps override headers set by earlier ones.

    Args:
        serve_ranges: Answer Range requests and advertise Accept-Ranges
        cache: Cache strategy (CacheValidation or NoCacheValidation).
            Defaults to CacheValidation with its default directives.
    """

    def __init__(self, serve_ranges: bool = True, cache=None):
        self._serve_ranges = serve_ranges
        self._cache = cache if cache is not None else CacheValidation()

    @property
    def can_serve_bytes(self) -> bool:
        return self._serve_ranges

    @property
    def cache_enabled(self) -> bool:
        return self._cache.enabled

    def respond_with_file(self, file=None, request: Optional[Any] = None) -> FileResponseOutcome:
        """
        Respond with a file.

        Args:
            file: File descriptor (e.g., LocalFile); None or a non-regular file yields 404
            request: Request (or header mapping) carrying conditional and Range headers

        Returns:
            FileResponseOutcome describing a 200, 206, 304, 404 or 416 response

        Raises:
            MalformedRangeError: If range serving is enabled and the Range header cannot be parsed
        """
        if file is None or not file.is_file():
            logger.debug(f"No regular file at {file}, responding not found")
            return self.file_not_found()

        validators = derive_validators(file) if self._cache.enabled else None
        outcome = self._with_metadata(self.create_response(), file, validators)

        if request is None:
            return self._with_body(outcome, file)

        headers = request_headers(request)

        if validators is not None and self._cache.is_not_modified(headers, validators):
            logger.debug(f"{file} not modified")
            return outcome.with_status(
                OutcomeKind.NOT_MODIFIED,
                int(HTTPStatus.NOT_MODIFIED),
                _reason(HTTPStatus.NOT_MODIFIED)
            )

        outcome = self._with_body(outcome, file)

        if self._should_add_range(headers):
            outcome = self._with_range(outcome, headers, file)

        return outcome

    def file_not_found(self, file=None) -> FileResponseOutcome:
        """
        Build a 404 outcome.

        Args:
            file: Optional page to send as the not-found body

        Returns:
            404 outcome, with cache prevention headers when caching is enabled
        """
        outcome = self.create_response(HTTPStatus.NOT_FOUND)
        outcome = outcome.with_headers(self._cache.prevention_headers())

        if file is not None and file.is_file():
            outcome = outcome.with_headers(basic_headers(file))
            outcome = self._with_body(outcome, file)

        return outcome

    def create_response(self, status_code: int = 200, reason_phrase: str = "") -> FileResponseOutcome:
        """
        Create a blank outcome with the given status.

        The standard reason phrase is used when none is given.
        """
        return FileResponseOutcome(
            kind=_KIND_BY_STATUS.get(status_code),
            status_code=int(status_code),
            reason_phrase=reason_phrase or _reason(status_code),
        )

    def _with_metadata(
        self,
        outcome: FileResponseOutcome,
        file,
        validators: Optional[Validators]
    ) -> FileResponseOutcome:
        headers = basic_headers(file)
        if validators is not None:
            headers[HEADER_LAST_MODIFIED] = validators.last_modified
        else:
            headers[HEADER_LAST_MODIFIED] = format_http_date(file.mtime)

        if self._serve_ranges:
            headers[HEADER_ACCEPT_RANGES] = RANGE_UNIT_BYTES

        outcome = outcome.with_headers(headers)

        if validators is not None:
            outcome = outcome.with_headers(self._cache.cache_headers())
            outcome = outcome.with_headers(self._cache.validator_headers(validators))

        return outcome

    def _with_body(self, outcome: FileResponseOutcome, file) -> FileResponseOutcome:
        return outcome.with_body(BodyWindow(file=file, start=0, end=file.size - 1))

    def _should_add_range(self, headers: Mapping[str, str]) -> bool:
        return self._serve_ranges and is_range_request(headers)

    def _with_range(self, outcome: FileResponseOutcome, headers: Mapping[str, str], file) -> FileResponseOutcome:
        spec = RangeSpec.from_request(headers, file.size)
        resolution = spec.resolve()
        outcome = outcome.with_headers(resolution.headers)

        if not resolution.satisfiable:
            logger.debug(f"Range {headers.get('range')} not satisfiable for {file} ({spec.total} bytes)")
            return outcome.with_status(
                OutcomeKind.RANGE_UNSATISFIABLE,
                resolution.status_code,
                _reason(resolution.status_code)
            )

        logger.debug(f"Serving {spec.content_range} of {file}")
        outcome = outcome.with_status(
            OutcomeKind.PARTIAL,
            resolution.status_code,
            _reason(resolution.status_code)
        )
        return outcome.with_body(BodyWindow(file=file, start=resolution.start, end=resolution.end))
