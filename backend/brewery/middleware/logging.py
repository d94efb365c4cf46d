"""
Brewery Backend — Access Log Middleware
=========================================

What:  One access-log line per HTTP request on the `brewery.access` logger.
How:   Times the downstream handler and logs once the response is known.
       4xx responses log at WARNING and 5xx at ERROR; everything else is INFO.
When:  Runs inside RequestIDMiddleware, so the request ID is available.

Logged:     method, path, status, duration, client IP, request ID
Not logged: request bodies, headers, query strings

For streamed collection responses the duration covers the handler up to
the first chunk, not the whole transfer.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from brewery.middleware.request_id import request_id_var

logger = logging.getLogger("brewery.access")

# Probed every few seconds by orchestrators
SILENT_PATHS = frozenset({"/health"})


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SILENT_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(response.status_code),
            "[%(request_id)s] %(method)s %(path)s -> %(status)d in %(duration_ms).1fms (%(client_ip)s)",
            fields,
            extra=fields,
        )
        return response
