"""Middleware package exports."""

from beatcrest.middleware.logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
