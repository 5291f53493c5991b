# === portfolio_api/core/errors.py ===
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """A lookup by id found no row."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def first_invalid_field(exc: RequestValidationError) -> tuple:
    errors = exc.errors()
    if not errors:
        return "body", "Invalid request body"

    error = errors[0]
    # loc looks like ("body", "email"); a body that is not JSON at all only has ("body", <offset>)
    names = [part for part in error.get("loc", ())[1:] if isinstance(part, str)]
    field = names[0] if names else "body"
    return field, f"Invalid value for '{field}': {error.get('msg', 'invalid')}"


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # unmatched paths and unmatched methods are both routing misses
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": "Not found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    field, message = first_invalid_field(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"message": message, "field": field})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
