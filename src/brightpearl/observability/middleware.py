"""
brightpearl.observability.middleware

Request-context middleware for the callback receiver.

Responsibilities:
- Generate/propagate request IDs.
- Bind the calling Brightpearl account (if any) into structlog contextvars.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        # accountCode is public (it is part of every API URL); token/signature are not bound.
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            account_code=request.query_params.get("accountCode"),
        )
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response
