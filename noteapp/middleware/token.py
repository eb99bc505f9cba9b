"""
Notes API — Bearer Token Extractor Middleware
==============================================

What:  Pulls the bearer token out of the `Authorization` header.
How:   Stores the raw token string (or None) on `request.state.token`.
       No verification happens here; routes that need an identity depend on
       noteapp.dependencies.get_current_user, which verifies the token.
Who:   Applied to every request.

Accepted header form: `Authorization: bearer <token>` (scheme is
case-insensitive). Any other form leaves `request.state.token` as None.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


class TokenExtractorMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.state.token = extract_bearer_token(request.headers.get("authorization"))
        return await call_next(request)
