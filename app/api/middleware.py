"""API middleware: correlation ID, acting user context, audit trigger."""

import json
import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.core.context import correlation_id_ctx, user_id_ctx

logger = logging.getLogger(__name__)

USER_HEADER = "X-User-ID"
CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Generate or preserve correlation ID; attach to request.state, response header, and logging context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        correlation_id_ctx.set(correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class UserContextMiddleware(BaseHTTPMiddleware):
    """
    Read the acting user from X-User-ID. The header is optional here; routes that mutate
    events require it through a dependency. A value that is not a UUID is rejected with 400.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.user_id = None
        raw = request.headers.get(USER_HEADER)
        if raw and raw.strip():
            try:
                request.state.user_id = uuid.UUID(raw.strip())
            except ValueError:
                return JSONResponse(
                    status_code=400,
                    content={"detail": "X-User-ID header must be a UUID"},
                )
            user_id_ctx.set(str(request.state.user_id))
        return await call_next(request)


class AuditTriggerMiddleware(BaseHTTPMiddleware):
    """After response: log structured audit event (correlation_id, user_id, path, method, status_code)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        correlation_id = getattr(request.state, "correlation_id", None)
        user_id = getattr(request.state, "user_id", None)
        audit_event = {
            "event": "request_audit",
            "correlation_id": correlation_id,
            "user_id": str(user_id) if user_id else None,
            "path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
        }
        logger.info(json.dumps(audit_event))
        return response
