"""Global exception handlers enforcing the `{"error": ...}` response contract."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

_UNMATCHED_ROUTE_DETAILS = {"Not Found", "Method Not Allowed"}
_HTTP_METHODS = ("get", "post", "put", "patch", "delete")

logger = structlog.get_logger(__name__)


def error_response(status_code: int, message: str, **context: Any) -> JSONResponse:
    """Build standardized JSON error payload."""
    return JSONResponse(status_code=status_code, content={"error": message, **context})


def available_endpoints(app: FastAPI) -> list[str]:
    """List `METHOD /path` for every documented API operation, including router routes."""
    endpoints: list[str] = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in _HTTP_METHODS:
            if method in operations:
                endpoints.append(f"{method.upper()} {path}")
    return endpoints


def _extract_message(detail: Any) -> str:
    """Normalize exception detail payload into a message string."""
    if isinstance(detail, dict):
        return str(detail.get("error") or detail.get("detail") or "Request failed.")
    if isinstance(detail, str) and detail:
        return detail
    return "Request failed."


def _correlation_id(request: Request) -> str:
    return getattr(
        request.state,
        "correlation_id",
        request.headers.get("x-correlation-id", "unknown"),
    )


def register_exception_handlers(app: FastAPI, environment: str) -> None:
    """Register global exception handlers enforcing error shape contract."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Answer unmatched routes with the catch-all 404 payload."""
        unmatched = isinstance(exc.detail, str) and exc.detail in _UNMATCHED_ROUTE_DETAILS
        if exc.status_code in {404, 405} and unmatched:
            logger.warning(
                "route_not_found",
                correlation_id=_correlation_id(request),
                path=request.url.path,
                method=request.method,
            )
            return error_response(
                404,
                "Route not found",
                path=request.url.path,
                method=request.method,
                availableEndpoints=available_endpoints(app),
            )
        return error_response(exc.status_code, _extract_message(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_exception(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Map request validation errors to a 400 payload."""
        message = "Invalid request payload."
        if environment == "development":
            errors = exc.errors()
            if errors:
                message = f"Invalid request payload: {errors[0].get('msg', 'validation error')}."
        return error_response(400, message)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
        """Mask internal errors outside development."""
        logger.error(
            "unhandled_exception",
            correlation_id=_correlation_id(request),
            path=request.url.path,
            method=request.method,
            error=str(exc),
        )
        message = str(exc) if environment == "development" else "Internal server error."
        return error_response(500, message or "Internal server error.")
