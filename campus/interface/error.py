"""Translation of domain errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from campus.domain.error import BusinessRuleViolationError, DomainError, NotFoundError


def unauthenticated(action: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=f"Authentication required to {action}",
    )


def to_http_exception(error: DomainError | ValueError) -> HTTPException:
    """Map an error raised by a use case to an HTTP error.

    NotFoundError -> 404, BusinessRuleViolationError -> 409, anything
    else (bad IDs, invalid parents, other domain errors) -> 400.
    """
    if isinstance(error, NotFoundError):
        logfire.warn("Resource not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, BusinessRuleViolationError):
        logfire.warn("Business rule violation", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
