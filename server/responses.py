"""Conversion of responder outcomes into Starlette responses."""

import logging
from http import HTTPStatus

from fastapi import Response
from fastapi.responses import StreamingResponse

from common.constants import HEADER_CONTENT_LENGTH, HEADER_CONTENT_RANGE, RANGE_UNIT_BYTES
from responder.types import BodyWindow, FileResponseOutcome, OutcomeKind

logger = logging.getLogger(__name__)


def fit_partial_window(outcome: FileResponseOutcome) -> FileResponseOutcome:
    """
    Trim a partial outcome to the bytes the file can actually supply.

    The responder declares the requested window as-is, so its end may lie
    past the end of the file and a reversed window has a negative length.
    The end is cut to the last byte of the file, with Content-Range and
    Content-Length rewritten to match. A window left with no bytes becomes
    a 416 with "bytes */<total>" and an empty body.

    Args:
        outcome: Outcome produced by FileResponder

    Returns:
        The outcome unchanged unless it is a partial outcome that needs fitting
    """
    if outcome.kind is not OutcomeKind.PARTIAL or outcome.body is None:
        return outcome

    window = outcome.body
    total = window.file.size
    end = min(window.end, total - 1)

    if end < window.start:
        logger.debug(f"Empty window {window.start}-{window.end} of {window.file}, answering 416")
        outcome = outcome.with_status(
            OutcomeKind.RANGE_UNSATISFIABLE,
            int(HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE),
            HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE.phrase
        )
        outcome = outcome.with_headers({
            HEADER_CONTENT_RANGE: f"{RANGE_UNIT_BYTES} */{total}",
            HEADER_CONTENT_LENGTH: "0",
        })
        return outcome.without_body()

    if end == window.end:
        return outcome

    outcome = outcome.with_headers({
        HEADER_CONTENT_RANGE: f"{RANGE_UNIT_BYTES} {window.start}-{end}/{total}",
        HEADER_CONTENT_LENGTH: str(end - window.start + 1),
    })
    return outcome.with_body(BodyWindow(file=window.file, start=window.start, end=end))


def to_http_response(outcome: FileResponseOutcome, send_body: bool = True) -> Response:
    """
    Build the HTTP response for a responder outcome.

    Partial windows are first fitted to the file, then the body window is
    streamed from the file with the outcome's headers.

    Args:
        outcome: Outcome produced by FileResponder
        send_body: False for HEAD requests

    Returns:
        StreamingResponse when a body is sent, plain Response otherwise
    """
    outcome = fit_partial_window(outcome)
    headers = dict(outcome.headers)

    if outcome.body is None or not send_body:
        return Response(status_code=outcome.status_code, headers=headers)

    window = outcome.body
    logger.debug(
        f"Streaming {window.length} bytes ({window.start}-{window.end}) of {window.file} status={outcome.status_code}"
    )
    return StreamingResponse(
        window.file.iter_bytes(window.start, window.end),
        status_code=outcome.status_code,
        headers=headers,
    )
