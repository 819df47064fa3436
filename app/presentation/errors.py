import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Every error body is {"error": "<message>"}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # location and type only: "input" would carry the raw password / code
    errors = [{"loc": e["loc"], "type": e["type"]} for e in exc.errors()]
    logger.info(
        "malformed request body",
        extra={"path": request.url.path, "errors": errors},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Malformed request"},
    )


async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    # cause is already logged by the adapter; never echo it to the client
    logger.error(
        "store unavailable",
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled error",
        extra={"method": request.method, "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
