"""Application errors and the handlers that turn them into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class FactuurProError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(FactuurProError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")


class DuplicateRecordError(FactuurProError):
    status_code = status.HTTP_409_CONFLICT


def commit_or_conflict(db: Session, detail: str) -> None:
    """Commit the session, turning unique-key violations into DuplicateRecordError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error on commit: %s", exc.orig)
        raise DuplicateRecordError(detail) from exc


def format_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        location = [str(loc) for loc in error.get("loc", ()) if loc != "body"]
        field = ".".join(location)
        message = error.get("msg", "Invalid value")
        parts.append(f"{field}: {message}" if field else message)
    return "Validation error: " + "; ".join(parts)


async def factuurpro_exception_handler(request: Request, exc: FactuurProError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def integrity_exception_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("Database integrity error on %s: %s", request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "A record with this value already exists"},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FactuurProError, factuurpro_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
