"""
Client error taxonomy and the handlers that render it.

Every failure this service reports is a client input problem.  Each
one is an exception carrying an HTTP status and a short message, and
all of them are rendered with the same ``{"error": <message>}``
envelope.  Routing failures raised by Starlette (unknown path, wrong
method) and request validation failures raised by FastAPI are folded
into the same envelope here.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_catalog_api.app.schemas.recipe import ErrorResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "bad request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MethodNotAllowed(CatalogError):
    """Request method not accepted by the matched route."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    message = "method not allowed"


class InvalidInput(CatalogError):
    """Malformed JSON body or a recipe payload without a usable name."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid input"


class InvalidID(CatalogError):
    """Path segment that is not a signed 64-bit integer."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid id"


class NotFound(CatalogError):
    """Valid id with no stored recipe, or an unknown route."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "not found"


def error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    """Render ``message`` in the shared error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.message, exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected payload for %s %s: %s", request.method, request.url.path, exc.errors())
    return await catalog_error_handler(request, InvalidInput())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = MethodNotAllowed()
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        error = NotFound()
    else:
        error = CatalogError(str(exc.detail).lower())
        error.status_code = exc.status_code
    logger.info("%s %s -> %s %s", request.method, request.url.path, error.status_code, error.message)
    # Keep the Allow header Starlette attaches to 405 responses.
    return error_response(error.message, error.status_code, headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on ``app``."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
