"""Per-request structured logging with credential redaction and request context binding."""

from __future__ import annotations

from collections.abc import Mapping
from time import perf_counter
from typing import Any
from uuid import uuid4

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

SENSITIVE_MARKERS = ("password", "token", "secret", "authorization", "cookie")
REDACTED = "***REDACTED***"
CORRELATION_ID_HEADER = "X-Correlation-ID"

logger = structlog.get_logger(__name__)


def is_sensitive_key(key: str) -> bool:
    """Return True when a parameter name looks like it carries a credential."""
    normalized = key.lower().replace("-", "_")
    return any(marker in normalized for marker in SENSITIVE_MARKERS)


def redact(values: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a mapping with credential-like values masked, recursing into nested data."""
    redacted: dict[str, Any] = {}
    for key, value in values.items():
        if is_sensitive_key(key):
            redacted[key] = REDACTED
        elif isinstance(value, Mapping):
            redacted[key] = redact(value)
        elif isinstance(value, list):
            redacted[key] = [redact(item) if isinstance(item, Mapping) else item for item in value]
        else:
            redacted[key] = value
    return redacted


def _client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for", "").strip()
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind correlation ID and caller origin, then emit one `request_completed` event.

    Every log line written while the request is handled carries `correlation_id`
    and `origin`. The correlation ID is echoed on the response, CORS preflights included.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = perf_counter()
        correlation_id = request.headers.get(CORRELATION_ID_HEADER, "").strip() or uuid4().hex
        origin = request.headers.get("origin")
        request.state.correlation_id = correlation_id
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id, origin=origin)
        fields: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "query_params": redact(dict(request.query_params)),
            "client_ip": _client_ip(request),
            "origin": origin,
            "correlation_id": correlation_id,
        }

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_completed",
                status_code=500,
                duration_ms=round((perf_counter() - start) * 1000, 2),
                **fields,
            )
            raise
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id", "origin")

        emit = logger.warning if response.status_code >= 400 else logger.info
        emit(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((perf_counter() - start) * 1000, 2),
            **fields,
        )
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
