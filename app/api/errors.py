"""Translate service and database failures into HTTP responses.

Clients get {"detail": <short message>}; driver errors are logged, never returned.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from app.services.errors import ServiceError, UnavailableError

logger = logging.getLogger(__name__)


def service_error_response(exc: ServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "reason": exc.message},
        )
    return service_error_response(exc)


async def handle_database_unavailable(
    request: Request, exc: OperationalError
) -> JSONResponse:
    logger.error(
        "Database unavailable",
        extra={"path": request.url.path, "reason": str(exc.orig)[:500]},
    )
    return service_error_response(
        UnavailableError("Service temporarily unavailable", cause=exc)
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or missing input is a 400, same as service-level validation."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(OperationalError, handle_database_unavailable)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
