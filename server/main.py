"""Entry point for the file server."""

import time
import uuid

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from responder.exceptions import FiledException, MalformedRangeError, NoRangeHeaderError
from server.config import SERVER_HOST, SERVER_PORT, DOCUMENT_ROOT
from server.routes.file_routes import router as file_router
from server.schemas import ErrorResponse, HealthResponse

logger = setup_logging('server')
setup_logging('responder')

app = FastAPI(
    title="Filed",
    description="Static file server with conditional GET and byte range support",
    version="1.0.0"
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware to log all HTTP requests and responses.
    """
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path} "
        f"range={request.headers.get('range')} [request_id={request_id}]"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
    )

    response.headers["X-Request-ID"] = request_id

    return response


@app.on_event("startup")
async def startup_event():
    logger.info(f"File server starting up, document root: {DOCUMENT_ROOT}")


@app.exception_handler(MalformedRangeError)
async def malformed_range_handler(request: Request, exc: MalformedRangeError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.warning(
        f"Malformed range error: {exc} [request_id={request_id}] path={request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(detail=str(exc), code="MALFORMED_RANGE").model_dump()
    )


@app.exception_handler(NoRangeHeaderError)
async def no_range_header_handler(request: Request, exc: NoRangeHeaderError):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Range resolution without Range header: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail=str(exc), code="NO_RANGE_HEADER").model_dump()
    )


@app.exception_handler(FiledException)
async def filed_exception_handler(request: Request, exc: FiledException):
    request_id = getattr(request.state, 'request_id', 'unknown')
    logger.error(
        f"Responder exception: {exc} [request_id={request_id}] path={request.url.path}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail=str(exc), code="INTERNAL_ERROR").model_dump()
    )


app.include_router(file_router)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.
    Returns 200 if service is alive.
    """
    return HealthResponse(status="healthy", service="server")


if __name__ == "__main__":
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
