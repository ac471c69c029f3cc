"""Error classification for the API.

Every failure a handler detects is raised as an ApiError subclass; anything
else is UNHANDLED. The exception handlers in error_handlers.py render all
of them as {"error": {"message": ..., "status": ...}}.
"""

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    UNHANDLED = "unhandled"


STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.METHOD_NOT_ALLOWED: 405,
    ErrorKind.UNHANDLED: 500,
}

DEFAULT_MESSAGES = {
    ErrorKind.BAD_REQUEST: "Bad Request",
    ErrorKind.NOT_FOUND: "Not Found",
    ErrorKind.METHOD_NOT_ALLOWED: "Method Not Allowed",
    ErrorKind.UNHANDLED: "Internal Server Error",
}


class ApiError(Exception):
    """Base exception for classified API errors."""

    kind: ErrorKind = ErrorKind.UNHANDLED

    def __init__(self, message: str | None = None):
        self.message = message or DEFAULT_MESSAGES[self.kind]
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_response(self) -> dict:
        return error_body(self.message, self.status)


class BadRequestError(ApiError):
    """Request body missing (or unusable) on a write."""
    kind = ErrorKind.BAD_REQUEST


class NotFoundError(ApiError):
    """No row matches the key in the path."""
    kind = ErrorKind.NOT_FOUND


def kind_for_status(status: int) -> ErrorKind:
    for kind, code in STATUS_BY_KIND.items():
        if code == status:
            return kind
    if 400 <= status < 500:
        return ErrorKind.BAD_REQUEST
    return ErrorKind.UNHANDLED


def error_body(message: str, status: int) -> dict:
    return {"error": {"message": message, "status": status}}
