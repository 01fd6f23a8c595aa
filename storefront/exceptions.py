"""Storefront exception hierarchy."""

from __future__ import annotations


class StorefrontError(Exception):
    """Base class for all storefront-specific exceptions."""


class BeatCrestUnavailableError(StorefrontError):
    """Raised when the BeatCrest API is temporarily unreachable."""

    def __init__(self, detail: str = "BeatCrest API unavailable.") -> None:
        super().__init__(detail)
        self.detail = detail


class BeatCrestResponseError(StorefrontError):
    """Raised when the BeatCrest API rejects a request or returns malformed data."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        """Initialize with optional HTTP status code context."""
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class SignupValidationError(StorefrontError):
    """Raised internally when signup form input fails local validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class SignupStateError(StorefrontError):
    """Raised when a form operation is not allowed in the current state."""

    def __init__(self, detail: str, code: str) -> None:
        """Initialize with user-facing detail and machine-readable code."""
        super().__init__(detail)
        self.detail = detail
        self.code = code
