from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


# -----------------------------
# Errors
# -----------------------------
class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


# Duplicates are reported to clients as a plain bad request
class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Resource already exists"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


# Store-layer failures; the SQLAlchemyError handler wraps them in this
class InternalError(AppError):
    pass


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


# -----------------------------
# Handlers
# -----------------------------
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.debug("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_request_error(exc)
    logger.debug("%s %s rejected (400): %s", request.method, request.url.path, message)
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s %s database error", request.method, request.url.path)
    # Surface the driver message, not SQLAlchemy's wrapper text
    orig = getattr(exc, "orig", None)
    error = InternalError(str(orig or exc))
    return _error_response(error.status_code, error.message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
