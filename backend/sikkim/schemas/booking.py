"""
Sikkim Tourism Backend — Booking Schemas
==========================================

What:  Contract for POST /api/bookings and the admin listing.

Field notes:
    name/email/phone/...: Numbers are accepted and stored as their text
    guests:          Omitted, null, 0 or not an integer → stored as 1
    destination_id:  Omitted, null, 0 or not an integer → stored as NULL;
                     otherwise stored without checking that the destination
                     exists
    start_date/end_date: Free-form strings, stored verbatim
"""

import re
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field

from sikkim.database import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN

_INTEGER_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def integer_or_none(value: Any) -> Optional[int]:
    """
    Read an integer the way a form field would be read, or give up quietly.

    "3", 3 and 3.0 all become 3. Anything else, including values outside
    SQLite's INTEGER range, becomes None so the service applies its default.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _INTEGER_TEXT.fullmatch(value):
        number = int(value)
    else:
        return None
    if not SQLITE_INTEGER_MIN <= number <= SQLITE_INTEGER_MAX:
        return None
    return number


LenientInt = Annotated[Optional[int], BeforeValidator(integer_or_none)]


class BookingCreate(BaseModel):
    """Body of POST /api/bookings. name and email are checked by BookingService."""
    name: Optional[str] = Field(default=None, description="Guest name (required)")
    email: Optional[str] = Field(default=None, description="Guest email (required)")
    phone: Optional[str] = Field(default=None)
    destination_id: LenientInt = Field(default=None, description="Destination identifier")
    guests: LenientInt = Field(default=None, description="Party size, defaults to 1")
    start_date: Optional[str] = Field(default=None, description="Arrival date, e.g. 2025-05-01")
    end_date: Optional[str] = Field(default=None, description="Departure date")
    notes: Optional[str] = Field(default=None)

    model_config = {"coerce_numbers_to_str": True}


class BookingOut(BaseModel):
    """A stored booking, including its assigned id and creation timestamp."""
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    destination_id: Optional[int] = None
    guests: int = 1
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    notes: Optional[str] = None
    created_at: str = Field(description="SQLite CURRENT_TIMESTAMP, 'YYYY-MM-DD HH:MM:SS' UTC")

    model_config = {"from_attributes": True}


class BookingWithDestination(BookingOut):
    """Admin listing row: the booking plus the referenced destination's name."""
    destination_name: Optional[str] = Field(
        default=None,
        description="Name of the referenced destination; null when absent or dangling",
    )
