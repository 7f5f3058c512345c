"""Error models for the Extend client."""
from __future__ import annotations

from typing import Any, Optional


class ExtendError(Exception):
    """Base exception for the Extend client."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "EXTEND_ERROR"
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(ExtendError):
    """Required configuration (e.g. credentials) is missing or invalid."""

    def __init__(self, message: str, missing: Optional[list[str]] = None):
        super().__init__(
            message,
            code="CONFIGURATION_ERROR",
            details={"missing": missing or []},
        )
        self.missing = missing or []


class TransportError(ExtendError):
    """The HTTP round trip failed (connection error, timeout, ...)."""

    def __init__(self, message: str, method: str, url: str):
        super().__init__(
            message,
            code="TRANSPORT_ERROR",
            details={"method": method, "url": url},
        )
        self.method = method
        self.url = url


class DecodeError(ExtendError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, message: str, url: str, body: str = ""):
        super().__init__(
            message,
            code="DECODE_ERROR",
            details={"url": url, "body": body[:200]},
        )
        self.url = url
        self.body = body


class SignInError(ExtendError):
    """The initial sign in did not produce a session."""

    def __init__(self, message: str, email: str):
        super().__init__(message, code="SIGN_IN_ERROR", details={"email": email})
        self.email = email
