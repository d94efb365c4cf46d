"""
Brewery Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and repositories; caught by global handlers.

Exception Hierarchy:
    BreweryError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Anything else that escapes a handler becomes a generic 500.
"""

from typing import Any, Dict, Iterable, List, Optional


class BreweryError(Exception):
    """
    Base exception for all Brewery application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BreweryError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    Carries every violated constraint, not just the first one, so a client
    can fix the whole payload in one round trip:

        {
            "error": "validation_error",
            "message": "Request validation failed: 2 violation(s)",
            "details": {"violations": [
                {"field": "customerName", "message": "String should have at least 3 characters",
                 "type": "string_too_short"},
                ...
            ]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        violations: Optional[List[Dict[str, str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        self.violations = violations or []
        ctx["violations"] = self.violations
        super().__init__(message=message, context=ctx)

    @classmethod
    def from_errors(cls, errors: Iterable[Dict[str, Any]]) -> "ValidationError":
        """
        Build from pydantic/FastAPI error dicts (`exc.errors()`).

        The leading location segment ("body", "path", "query") is dropped so
        `("body", "customerName")` is reported as `customerName`.
        """
        violations = []
        for error in errors:
            loc = [str(part) for part in error.get("loc", ())]
            if loc and loc[0] in {"body", "path", "query", "header"}:
                loc = loc[1:]
            violations.append({
                "field": ".".join(loc) or "body",
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            })
        return cls(
            message=f"Request validation failed: {len(violations)} violation(s)",
            violations=violations,
        )


class NotFoundError(BreweryError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found

    Repositories return None for missing rows; services convert that into
    this exception so the HTTP mapping stays in one place.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class DatabaseError(BreweryError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The driver error
    is kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
