"""
Contact Book Backend — Request ID Middleware
==============================================

What:  Assigns an ID to each incoming request and returns it in X-Request-ID.
Why:   Every log line of one request, including error-handler lines, shares
       the same ID, so a failing call can be traced from the client's header.
How:   Uses the client's X-Request-ID if sent, otherwise a short UUID; stores
       it in a ContextVar read by the logging middleware and error handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough for correlation and stays readable in logs
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        request_id_var.set(rid)

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
