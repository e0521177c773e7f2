"""
Sikkim Tourism Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for each error class the API reports.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) translate them into
       JSON responses of the form {"error": ..., "details": ..., "request_id": ...}.
Who:   Raised by services, the admin gate and the bootstrap routine.
When:  During request processing, or once at startup for StartupError.

Exception Hierarchy:
    TourismError (base)
    ├── ValidationError      → 400 Bad Request (missing field, malformed body)
    ├── AuthorizationError   → 401 Unauthorized (missing or wrong admin token)
    ├── NotFoundError        → 404 Not Found
    ├── DatabaseError        → 500 Internal Server Error (+ driver details)
    └── StartupError         → fatal, process exits before listening
"""

from typing import Any, Dict, Optional


class TourismError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned as the `error` field)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TourismError):
    """
    Raised when client input fails validation.

    When:    A required field is missing or empty, or the body cannot be parsed.
    HTTP:    400 Bad Request

    Raised before any storage access, so a failed validation never leaves
    a row behind.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = fields
        super().__init__(message=message, context=ctx)
        self.fields = fields or []


class AuthorizationError(TourismError):
    """
    Raised by the admin gate when the token is missing or does not match.

    HTTP:    401 Unauthorized
    """

    def __init__(self, message: str = "unauthorized", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class NotFoundError(TourismError):
    """
    Raised when an identifier has no matching row.

    When:    GET /api/destinations/{id} or DELETE /api/bookings/{id} with an
             unknown or malformed id.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(TourismError):
    """
    Raised when a storage statement fails.

    When:    I/O failure, locked database, constraint violation.
    HTTP:    500 Internal Server Error

    `details` holds the driver-reported text and is returned to the client
    in the `details` field of the error body.
    """

    def __init__(
        self,
        message: str = "db error",
        details: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.details = details


class StartupError(TourismError):
    """
    Raised when the database cannot be opened, created or seeded.

    Propagates out of the application lifespan; uvicorn aborts startup and
    the process exits without accepting connections.
    """

    def __init__(self, message: str = "Database bootstrap failed", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)
