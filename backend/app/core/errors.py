"""
Centralized error handling for service and API failures.
Domain exceptions carry their HTTP status so routes stay thin; handlers render every
failure as {"error": "<message>"}.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_ERROR = 500

MSG_SLOT_ALREADY_BOOKED = "Time slot is already booked"
MSG_MISSING_TOKEN = "Unauthorized: Missing token"
MSG_INVALID_SESSION = "Unauthorized: Invalid session"


# ---------------------------------------------------------------------------
# Exception taxonomy
# ---------------------------------------------------------------------------


class AppError(Exception):
    """Base for errors surfaced to the caller in the same request. Never retried."""

    status_code = STATUS_INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input (bad time string, non-positive duration, ...)."""

    status_code = STATUS_BAD_REQUEST


class AuthenticationError(AppError):
    status_code = STATUS_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = STATUS_NOT_FOUND


class SlotAlreadyBooked(AppError):
    """A confirmed booking already holds this (expert, date, time). Caller should pick another slot."""

    status_code = STATUS_BAD_REQUEST

    def __init__(self, message: str = MSG_SLOT_ALREADY_BOOKED) -> None:
        super().__init__(message)


class UpstreamStorageError(AppError):
    status_code = STATUS_INTERNAL_ERROR


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=STATUS_BAD_REQUEST, content=error_body(_format_validation_errors(exc)))


async def _storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    wrapped = UpstreamStorageError(str(exc.orig) if getattr(exc, "orig", None) else str(exc))
    return JSONResponse(status_code=wrapped.status_code, content=error_body(wrapped.message))


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers so every failure is returned as {"error": message} with its status."""
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, _storage_error_handler)
