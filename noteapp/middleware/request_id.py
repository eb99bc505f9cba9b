"""
Notes API — Request ID Middleware
==================================

What:  Tags each request with a short ID and echoes it in `X-Request-ID`.
How:   A client-supplied `X-Request-ID` is kept only when it is a short
       token of letters, digits and dashes; anything else is replaced by a
       generated 8-character ID. The ID lands in a ContextVar, read by the
       access log and by the `request_id` field of error bodies.
When:  Outermost middleware, so every later layer sees the ID.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_ACCEPTED_ID = re.compile(r"[A-Za-z0-9-]{1,64}")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def accept_request_id(value: Optional[str]) -> str:
    """Return `value` if it is safe to echo into headers and logs, else a fresh ID."""
    if value and _ACCEPTED_ID.fullmatch(value):
        return value
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = accept_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
