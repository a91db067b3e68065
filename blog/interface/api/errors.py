"""Mapping of domain errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from blog.domain.error import (
    AuthenticationError,
    CategoryNotEmptyError,
    ConflictError,
    ContentPathError,
    DomainError,
    NotFoundError,
    PostRelocationError,
)


def to_http_exception(error: DomainError, failure: str) -> HTTPException:
    """Translate a domain error raised by a use case.

    Args:
        error: The domain error
        failure: Generic message shown for faults that are not the client's

    Returns:
        HTTPException to raise
    """
    if isinstance(error, (PostRelocationError, ContentPathError)):
        logfire.error(failure, error=str(error), error_type=type(error).__name__)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure
        )

    logfire.warn(failure, error=str(error), error_type=type(error).__name__)

    if isinstance(error, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, CategoryNotEmptyError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(error), "count": error.count},
        )
    # ValidationError, ProtectedCategoryError and any other rule violation
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def internal_error(error: Exception, failure: str) -> HTTPException:
    """Log an unexpected fault and hide its details from the client."""
    logfire.error(
        failure,
        error=str(error),
        error_type=type(error).__name__,
        _exc_info=error,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure
    )
