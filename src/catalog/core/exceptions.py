"""Service-layer error taxonomy.

Business outcomes the caller is expected to handle (conflicting input,
missing records, malformed requests) are raised as ``ServiceError``
subclasses.  Each carries an ``ErrorKind`` which the API boundary maps
to an HTTP status code; anything that is not a ``ServiceError`` is an
internal failure.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class ServiceError(Exception):
    """Base class for recoverable, caller-facing service failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """The request is malformed or cannot be processed as given."""

    kind = ErrorKind.BAD_REQUEST


class NotFoundError(ServiceError):
    """The requested record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(ServiceError):
    """The request conflicts with its own content or with stored records."""

    kind = ErrorKind.CONFLICT
