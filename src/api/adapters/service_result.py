"""Adapter from engine ServiceResult failures to HTTP errors.

Mapping:
    DUPLICATE      -> 409 Conflict
    NOT_FOUND      -> 404 Not Found
    INVALID        -> 400 Bad Request
    LIMIT_REACHED  -> 400 Bad Request
"""

from typing import TypeVar

from fastapi import HTTPException, Request

from src.domain.models.service_result import ErrorKind, ServiceResult

T = TypeVar("T")

ERROR_TYPE_BASE = "urn:task-rotation:error"

_STATUS_BY_KIND: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.DUPLICATE: (409, "Conflict"),
    ErrorKind.NOT_FOUND: (404, "Not Found"),
    ErrorKind.INVALID: (400, "Invalid Request"),
    ErrorKind.LIMIT_REACHED: (400, "Limit Reached"),
}


def status_for(kind: ErrorKind) -> int:
    """Return the HTTP status for a failure kind.

    Raises:
        ValueError: If kind is NONE, which is not a failure.
    """
    if kind not in _STATUS_BY_KIND:
        raise ValueError(f"{kind!r} is not a failure kind")
    return _STATUS_BY_KIND[kind][0]


def to_http_exception(result: ServiceResult[object], request: Request) -> HTTPException:
    """Build an RFC 7807 HTTPException for a failed result."""
    status, title = _STATUS_BY_KIND[result.error_kind]
    return HTTPException(
        status_code=status,
        detail={
            "type": f"{ERROR_TYPE_BASE}:{result.error_kind.value.replace('_', '-')}",
            "title": title,
            "status": status,
            "detail": result.message or title,
            "instance": str(request.url),
        },
    )


def unwrap(result: ServiceResult[T], request: Request) -> T:
    """Return the result's value or raise the matching HTTP error.

    Args:
        result: Engine result.
        request: Current request, used for the problem instance.

    Returns:
        The success value.

    Raises:
        HTTPException: If the result is a failure.
    """
    if not result.success:
        raise to_http_exception(result, request)
    return result.value  # type: ignore[return-value]
