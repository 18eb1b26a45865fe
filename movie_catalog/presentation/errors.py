from http import HTTPStatus

from fastapi import HTTPException

from movie_catalog.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

INTERNAL_ERROR_DETAIL = "Internal server error"

_STATUS_BY_ERROR = (
    (InvalidInputError, HTTPStatus.BAD_REQUEST),
    (ValidationError, HTTPStatus.UNPROCESSABLE_ENTITY),
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (ConflictError, HTTPStatus.CONFLICT),
)


def to_http_exception(error: DomainError) -> HTTPException:
    if isinstance(error, UnauthenticatedError):
        return HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=str(error),
            headers={"WWW-Authenticate": "Bearer"},
        )

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    # RepositoryError and anything unclassified; the cause was logged where it was raised
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)
