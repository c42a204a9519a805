"""File serving routes."""

import logging

from fastapi import APIRouter, Depends, Request

from responder.assembler import FileResponder
from server import config
from server.dependencies import get_file_responder
from server.documents import not_found_page, resolve_document
from server.responses import to_http_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["Files"])


@router.api_route("/{file_path:path}", methods=["GET", "HEAD"])
async def serve_file(
    file_path: str,
    request: Request,
    responder: FileResponder = Depends(get_file_responder)
):
    """
    Serve a file from the document root.

    Parameters:
        - file_path: Path of the file relative to the document root
        - If-None-Match / If-Modified-Since headers: conditional request
        - Range header: single byte range (bytes=<start>-<end>)

    Returns:
        - 200: Full file
        - 206: Requested byte range
        - 304: Client copy is current
        - 404: No such file
        - 416: Range starts past the end of the file

    Raises:
        - 400: Malformed Range header
    """
    document = resolve_document(config.DOCUMENT_ROOT, file_path)

    if document is None or not document.is_file():
        outcome = responder.file_not_found(not_found_page(config.NOT_FOUND_PAGE))
    else:
        outcome = responder.respond_with_file(document, request)

    logger.info(f"Serving {file_path}: {outcome.kind.value if outcome.kind else 'custom'} ({outcome.status_code})")

    return to_http_response(outcome, send_body=request.method != "HEAD")
