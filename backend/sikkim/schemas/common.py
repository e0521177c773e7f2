"""
Sikkim Tourism Backend — Shared Response Envelopes
====================================================

Every successful payload is wrapped as {"data": ...}; deletes answer
{"success": true}; errors follow ErrorResponse.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """{"data": <record or list of records>}"""
    data: T


class SuccessResponse(BaseModel):
    """Returned by DELETE /api/bookings/{id} when a row was removed."""
    success: bool = Field(default=True)


class HealthResponse(BaseModel):
    """
    What:  Liveness marker returned by GET /api/health.
    Who:   Load balancers, uptime probes, the frontend's status badge.
    """
    status: str = Field(description="Always 'ok'")
    time: str = Field(description="Current server time, ISO 8601 UTC")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Fields:
        error: Human-readable description (e.g. "unauthorized", "not found")
        details: Driver text for storage errors, field errors for bad bodies
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {"error": "db error", "details": "database is locked", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
