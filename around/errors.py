"""Error taxonomy shared by the services and the API layer.

Every failure the application knows how to classify is an ``ApiError`` with
exactly one ``ErrorKind``. The kind fixes the HTTP status; the message is the
text returned to the client. Anything that is not an ``ApiError`` is treated
as an internal error by the centralized handler and never shown verbatim.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of classified failures."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TOO_MANY_REQUESTS = "too_many_requests"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        """HTTP status code for this kind."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.TOO_MANY_REQUESTS: 429,
    ErrorKind.INTERNAL: 500,
}

INTERNAL_ERROR_MESSAGE = "An error occurred on the server"


class ApiError(Exception):
    """Base class for classified failures."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, headers: dict[str, str] | None = None):
        super().__init__(message)
        self.message = message
        self.headers = headers

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class BadRequestError(ApiError):
    """Malformed or invalid input, including malformed identifiers."""

    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(ApiError):
    """Missing, invalid or expired credentials."""

    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(ApiError):
    """Authenticated but not permitted."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(ApiError):
    """Requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(ApiError):
    """Uniqueness violation."""

    kind = ErrorKind.CONFLICT


class RateLimitExceededError(ApiError):
    """Client exceeded the request window."""

    kind = ErrorKind.TOO_MANY_REQUESTS
