"""
Sikkim Tourism Backend — Pydantic Request/Response Schemas
============================================================

What:  The API contract: create payloads, record shapes and response envelopes.
How:   FastAPI serializes responses through these models and publishes them in
       the OpenAPI document at /docs.
"""

from sikkim.schemas.booking import BookingCreate, BookingOut, BookingWithDestination
from sikkim.schemas.common import DataResponse, ErrorResponse, HealthResponse, SuccessResponse
from sikkim.schemas.contact import ContactCreate, ContactOut
from sikkim.schemas.destination import DestinationCreate, DestinationOut

__all__ = [
    "BookingCreate",
    "BookingOut",
    "BookingWithDestination",
    "ContactCreate",
    "ContactOut",
    "DataResponse",
    "DestinationCreate",
    "DestinationOut",
    "ErrorResponse",
    "HealthResponse",
    "SuccessResponse",
]
