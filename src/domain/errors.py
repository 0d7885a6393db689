"""
Classified failures surfaced by the market-data gateway.
Zero external dependencies.

Every failure that crosses the gateway boundary is a GatewayError subclass and
serializes to a flat error descriptor via to_dict().  PartialResult is not an
exception: it records a tolerated secondary failure (company-info profile).
"""

from dataclasses import dataclass
from typing import Any, Optional


class GatewayError(Exception):
    """Base class for every classified gateway failure."""

    kind = "GatewayError"

    def __init__(
        self,
        message: str,
        error_code: str = "GATEWAY_ERROR",
        operation: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.operation = operation
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "kind": self.kind,
            "code": self.error_code,
            "operation": self.operation,
            "details": dict(self.details),
        }


class ValidationError(GatewayError):
    """A parameter failed its declared shape.  Never retried."""

    kind = "ValidationError"

    def __init__(
        self,
        message: str,
        field: str,
        operation: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        merged = {"field": field, **(details or {})}
        super().__init__(message, "VALIDATION_ERROR", operation, merged)
        self.field = field


class UpstreamUnavailable(GatewayError):
    """The upstream provider could not serve the request (fallback included)."""

    kind = "UpstreamUnavailable"

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        primary_error: Optional[str] = None,
    ) -> None:
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if primary_error is not None:
            details["primary_error"] = primary_error
        super().__init__(message, "UPSTREAM_UNAVAILABLE", operation, details)
        self.status_code = status_code
        self.primary_error = primary_error


class UpstreamResponseError(Exception):
    """Raised by HTTP-backed providers when the upstream answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        super().__init__(f"Upstream responded with HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url
        self.body = body


@dataclass(frozen=True)
class PartialResult:
    """A secondary upstream call failed but the operation still succeeds."""

    field: str
    message: str
