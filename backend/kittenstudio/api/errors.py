"""Opaque error responses for the validation boundary."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from kittenstudio.models.responses import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request"
NOT_FOUND = "Not found"


class RequestRejected(Exception):
    """Raised by handlers to answer with an opaque error body."""

    def __init__(self, status_code: int = 400, reason: str = "invalid") -> None:
        super().__init__(reason)
        self.status_code = status_code
        # Logged server-side only
        self.reason = reason


def error_response(status_code: int, message: str = INVALID_REQUEST) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


async def _on_rejected(request: Request, exc: RequestRejected) -> JSONResponse:
    logger.info("%s %s rejected (%s) -> %d", request.method, request.url.path, exc.reason, exc.status_code)
    return error_response(exc.status_code)


async def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = NOT_FOUND if exc.status_code == 404 else INVALID_REQUEST
    return error_response(exc.status_code, message)


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s rejected: %d parameter error(s)", request.method, request.url.path, len(exc.errors()))
    return error_response(400)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestRejected, _on_rejected)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(RequestValidationError, _on_validation_error)
