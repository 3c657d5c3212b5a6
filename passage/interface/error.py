"""Mapping of domain and adapter errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from passage.adapter.error import AdapterError
from passage.domain.error import (
    BadRequestError,
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (BadRequestError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers that turn domain and adapter errors into responses."""

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(
                "Internal error on %s %s: %r", request.method, request.url.path, exc
            )
            return JSONResponse(
                status_code=status_code, content={"detail": "Internal server error"}
            )

        logger.info(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc,
        )
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code, content={"detail": str(exc)}, headers=headers
        )

    @app.exception_handler(AdapterError)
    async def handle_adapter_error(request: Request, exc: AdapterError) -> JSONResponse:
        logger.error(
            "Adapter error on %s %s: %r", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
