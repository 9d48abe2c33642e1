"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status
from pydantic.alias_generators import to_camel

from app.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainRuleError,
    NotFoundError,
)


def to_http_exception(exc: ValueError) -> HTTPException:
    """Return the HTTP error answering a rejected mutation or lookup."""

    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"success": False, "message": str(exc)},
        )
    if isinstance(exc, DomainRuleError):
        detail = {"message": exc.message}
        detail.update({to_camel(key): value for key, value in exc.context.items()})
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
