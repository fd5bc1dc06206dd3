"""
Error hierarchy - typed marketplace failures with a machine-readable kind.
Challenge: One uniform error shape for every endpoint; no swallowed failures.

Every error carries:
    - kind: taxonomy bucket (bad_request, unauthorized, forbidden, not_found, conflict)
    - code: specific reason (SELF_PURCHASE, INVALID_STATUS_TRANSITION, ...)
    - http_status: status the global handler responds with
Services raise at the point of detection; errors propagate unmodified to the
handlers in vinylplatz/api/error_handlers.py.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Taxonomy surfaced to API clients."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class MarketplaceError(Exception):
    """Base exception for all marketplace errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        http_status: int,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.http_status = http_status
        self.details = details or {}

    def to_response(self) -> dict:
        """Convert to the standard REST error envelope."""
        body: dict[str, Any] = {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            body["details"] = self.details
        return {"error": body}


class BadRequestError(MarketplaceError):
    """Malformed input or a request that breaks a business rule."""

    def __init__(self, message: str, code: str = "BAD_REQUEST", details: dict[str, Any] | None = None):
        super().__init__(message, code, ErrorKind.BAD_REQUEST, 400, details)


class UnauthorizedError(MarketplaceError):
    """Missing or invalid credentials or token."""

    def __init__(self, message: str = "Not authenticated", code: str = "UNAUTHORIZED"):
        super().__init__(message, code, ErrorKind.UNAUTHORIZED, 401)


class ForbiddenError(MarketplaceError):
    """Authenticated, but not allowed to touch this entity."""

    def __init__(self, message: str, code: str = "FORBIDDEN", details: dict[str, Any] | None = None):
        super().__init__(message, code, ErrorKind.FORBIDDEN, 403, details)


class NotFoundError(MarketplaceError):
    """Referenced entity id does not exist."""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND",
            ErrorKind.NOT_FOUND,
            404,
            {"resource": resource_type, "id": str(resource_id)},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(MarketplaceError):
    """Uniqueness violation (email, genre name)."""

    def __init__(self, message: str, code: str = "CONFLICT", details: dict[str, Any] | None = None):
        super().__init__(message, code, ErrorKind.CONFLICT, 409, details)


# --- Order rules ---

class SelfPurchaseError(BadRequestError):
    """Buyer tried to order their own listing."""

    def __init__(self, vinyl_id: Any):
        super().__init__(
            "You cannot buy your own vinyl",
            "SELF_PURCHASE",
            {"vinyl_id": str(vinyl_id)},
        )


class InvalidStatusTransitionError(BadRequestError):
    """Requested order status is not reachable from the current one."""

    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Invalid status transition from '{current}' to '{requested}'",
            "INVALID_STATUS_TRANSITION",
            {"current": current, "requested": requested},
        )
        self.current = current
        self.requested = requested
