"""
Notes API — Access Log Middleware
==================================

What:  One line per request on the `noteapp.access` logger.
How:   Records method, path, status, duration, the request ID and whether a
       bearer token was presented. A request whose handler raised is logged
       as 500 before the exception propagates.
When:  Inside RequestIDMiddleware, outside the token extractor.

Never logged: request bodies (passwords) and the token itself.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from noteapp.middleware.request_id import request_id_var
from noteapp.middleware.token import extract_bearer_token

logger = logging.getLogger("noteapp.access")

UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        auth = "bearer" if extract_bearer_token(request.headers.get("authorization")) else "anonymous"
        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.log(
                level_for_status(status),
                "%s %s %d %.1fms [%s] %s",
                request.method,
                request.url.path,
                status,
                elapsed_ms,
                request_id_var.get(""),
                auth,
            )
