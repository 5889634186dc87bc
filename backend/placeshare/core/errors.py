"""Error Hierarchy - typed, categorized failures for all PlaceShare failure modes.

Invariants:
    - Every error has a message, code, category, severity and http_status
    - Client errors (4xx) have severity ERROR or below; server errors (5xx) are CRITICAL
    - to_response() produces the only wire shape for failures: {"message": str}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PlaceShareError base: services return instances inside
      Err values, the terminal handler in api/error_handlers.py serializes them
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    EXTERNAL_API = "external_api"
    DATABASE = "database"
    INTERNAL = "internal"


INVALID_INPUT_MESSAGE = "Invalid inputs passed, please check your data."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred!"


class PlaceShareError(Exception):
    """Base exception for all PlaceShare errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(PlaceShareError):
    """Request payload failed validation."""
    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 422,
        )


class ResourceNotFoundError(PlaceShareError):
    """Requested place or user does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"Could not find a {resource_type} for the provided id.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RouteNotFoundError(PlaceShareError):
    """No route matched the request path."""
    def __init__(self):
        super().__init__(
            "Could not find this route.",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class UserExistsError(PlaceShareError):
    """Signup attempted with an email that is already registered."""
    def __init__(self):
        super().__init__(
            "User exists already, please login instead.",
            "USER_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


class InvalidCredentialsError(PlaceShareError):
    """Login failed. Same error for unknown email and wrong password."""
    def __init__(self):
        super().__init__(
            "Invalid credentials, could not log you in.",
            "INVALID_CREDENTIALS", ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, 401,
        )


class UnresolvableAddressError(PlaceShareError):
    """Geocoding provider returned zero results for the address."""
    def __init__(self, address: str):
        super().__init__(
            "Could not find location for the specified address.",
            "UNRESOLVABLE_ADDRESS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 422,
        )
        self.address = address


# ─── Server Errors (500-level) ──────────────────────────────────

class GeocoderUnavailableError(PlaceShareError):
    """Geocoding provider unreachable, timed out or refused the request."""
    def __init__(self, reason: str):
        super().__init__(
            "Could not reach the geocoding service, please try again later.",
            "GEOCODER_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, 500,
        )
        self.reason = reason


class DatabaseError(PlaceShareError):
    """Storage backend unreachable or a query failed. ``cause`` is for logs only."""
    def __init__(self, cause: str):
        super().__init__(
            "Could not reach the database, please try again later.",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.cause = cause
