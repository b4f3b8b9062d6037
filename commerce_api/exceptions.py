"""Translation of domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from commerce_api.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from commerce_api.domain.identity.exceptions import (
    DuplicateEmailError,
    DuplicateLoginIdError,
    PasswordMismatchError,
    RegistrationDisabledError,
    SamePasswordReuseError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before their bases
DOMAIN_ERROR_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (PasswordMismatchError, status.HTTP_401_UNAUTHORIZED),
    (SamePasswordReuseError, status.HTTP_400_BAD_REQUEST),
    (DuplicateLoginIdError, status.HTTP_409_CONFLICT),
    (DuplicateEmailError, status.HTTP_409_CONFLICT),
    (RegistrationDisabledError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
)


def status_code_for(error: DomainError) -> int:
    for error_type, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(error: DomainError) -> dict[str, dict[str, str | None]]:
    """Response body for a domain error. Only the field name is exposed, never the value."""
    return {
        "error": {
            "code": error.code,
            "message": error.message,
            "field": getattr(error, "field", None),
        }
    }


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, DomainError):
        raise exc
    status_code = status_code_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Unhandled domain error on {request.url.path}: {exc.code}", exc_info=exc)
    return JSONResponse(status_code=status_code, content=error_body(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
