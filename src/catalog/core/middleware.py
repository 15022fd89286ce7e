import time
import uuid
from typing import Callable, Optional

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


def _view_name(request: HttpRequest) -> Optional[str]:
    match = getattr(request, "resolver_match", None)
    return match.view_name if match is not None else None


class CorrelationIdMiddleware:
    """Tags every request with a correlation ID and logs its outcome.

    The ID comes from the ``X-Request-ID`` header, or a fresh UUID4 when
    the client sends none.  It is bound into structlog's context vars, so
    every log line emitted while serving the request carries it, and it
    is echoed back in the response header.

    ``request_finished`` also records the resolved view (for example
    ``product-list`` or ``product-detail``) and the elapsed time.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        start = time.monotonic()
        logger.info("request_started", method=request.method, path=request.path)

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.path,
            view=_view_name(request),
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
