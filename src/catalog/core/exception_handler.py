"""DRF exception handler producing the service's error payload.

Every error response has the shape::

    {"status_code": 409, "message": "Conflict", "description": "..."}

``ServiceError`` subclasses are mapped by their ``ErrorKind``; DRF's own
exceptions keep their status code; anything else is reported as a 500
with the underlying message.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import set_rollback

from catalog.core.exceptions import ErrorKind, ServiceError

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request"

_KIND_TO_STATUS = {
    ErrorKind.BAD_REQUEST: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Not found"),
    ErrorKind.CONFLICT: (status.HTTP_409_CONFLICT, "Conflict"),
}


def error_payload(status_code: int, message: str, description: str) -> dict[str, Any]:
    return {
        "status_code": status_code,
        "message": message,
        "description": description,
    }


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """Translate any exception raised by a view into an error response."""
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, Http404):
        exc = exceptions.NotFound(*exc.args)
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied(*exc.args)

    if isinstance(exc, ServiceError):
        status_code, message = _KIND_TO_STATUS[exc.kind]
        logger.warning(
            "api.service_error",
            view=view_name,
            kind=exc.kind.value,
            description=exc.message,
        )
        set_rollback()
        return Response(
            error_payload(status_code, message, exc.message), status=status_code
        )

    if isinstance(exc, exceptions.APIException):
        status_code = exc.status_code
        logger.warning(
            "api.request_error",
            view=view_name,
            status_code=status_code,
            description=str(exc.detail),
        )
        set_rollback()
        return Response(
            error_payload(status_code, str(exc.default_detail), str(exc.detail)),
            status=status_code,
        )

    # Anything else is an internal failure
    logger.exception("api.unhandled_error", view=view_name)
    set_rollback()
    return Response(
        error_payload(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, str(exc)
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
