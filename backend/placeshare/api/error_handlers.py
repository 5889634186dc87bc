"""Error Handlers - the terminal stage that turns every failure into one JSON body.

Invariants:
    - PlaceShareError -> its own http_status and {"message"} (passed through unchanged)
    - RequestValidationError -> 422 with the fixed invalid-input message
    - Unmatched route (Starlette 404, or 405 for a known path with another
      method) -> 404 "Could not find this route."
    - Exception (catch-all) -> 500 generic message, never leaks internal details
    - A fault raised after the response started is re-raised by Starlette
      instead of being written twice

Design Decisions:
    - Field-level validation detail is logged, not returned
    - ClientDisconnect answered with 499 and no body: nobody is listening
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

from placeshare.core.errors import (
    UNKNOWN_ERROR_MESSAGE, InvalidInputError, PlaceShareError, RouteNotFoundError,
)

logger = logging.getLogger(__name__)

CLIENT_CLOSED_REQUEST = 499

_NO_ROUTE_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_placeshare_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_disconnect_handler(app)
    _register_generic_error_handler(app)


def error_response(exc: PlaceShareError, request: Request) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )


def _register_placeshare_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PlaceShareError)
    async def placeshare_error_handler(request: Request, exc: PlaceShareError):
        """Handle all PlaceShare domain/infrastructure errors."""
        return error_response(exc, request)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Collapse pydantic validation errors into one invalid-input response."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return error_response(InvalidInputError(), request)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """No handler for the method and path pair -> RouteNotFoundError; other HTTP errors keep their status."""
        if exc.status_code in _NO_ROUTE_STATUSES:
            return error_response(RouteNotFoundError(), request)
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_disconnect_handler(app: FastAPI) -> None:

    @app.exception_handler(ClientDisconnect)
    async def disconnect_handler(request: Request, exc: ClientDisconnect):
        logger.info(
            "Client closed request",
            extra={"path": request.url.path, "status_code": CLIENT_CLOSED_REQUEST},
        )
        return Response(status_code=CLIENT_CLOSED_REQUEST)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": UNKNOWN_ERROR_MESSAGE},
        )
