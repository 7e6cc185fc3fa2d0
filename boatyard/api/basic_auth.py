"""Basic Auth Middleware — stateless HTTP Basic authentication for every request.

Invariants:
    - Runs before routing: unknown paths and unknown ids get 401 without credentials
    - Each request authenticated independently (no session, no cookie, no CSRF token)
    - 401 carries the AuthenticationError envelope and no WWW-Authenticate header,
      so browsers never show their login popup
    - Authenticated username exposed as request.state.principal

Design Decisions:
    - Middleware over a router dependency: applied once in create_app and covers
      every route, including ones added later
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from boatyard.core.errors import AuthenticationError
from boatyard.core.principals import PrincipalSet, parse_basic_authorization

logger = logging.getLogger(__name__)


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """Reject requests without valid Basic credentials for a configured principal."""

    def __init__(self, app: ASGIApp, principals: PrincipalSet):
        super().__init__(app)
        self.principals = principals

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        credentials = parse_basic_authorization(
            request.headers.get("Authorization"),
        )
        if credentials is None or not self.principals.authenticate(*credentials):
            logger.warning(
                "Authentication rejected",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "principal": credentials[0] if credentials else None,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=AuthenticationError().to_response(),
            )
        request.state.principal = credentials[0]
        return await call_next(request)
