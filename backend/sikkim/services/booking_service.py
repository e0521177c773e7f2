"""
Sikkim Tourism Backend — Booking Service
==========================================

What:  Create, list and delete booking requests.
How:   One cohesive method per operation, so the insert and the re-read of a
       new booking cannot be split apart by a caller.
Who:   Called by the routes in routes/bookings.py.

Defaults applied on create:
    phone, start_date, end_date, notes   empty → NULL
    destination_id                        empty/0/non-integer → NULL (never checked against destinations)
    guests                                empty/0/non-integer → 1
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sikkim.exceptions import NotFoundError, ValidationError
from sikkim.models import Booking, Destination
from sikkim.schemas import BookingCreate, BookingOut, BookingWithDestination
from sikkim.services.validation import database_error, missing_fields, parse_identifier

logger = logging.getLogger(__name__)


class BookingService:
    """
    Stateless operations over the bookings table.

    Error Handling Strategy:
        Presence checks raise ValidationError before any statement runs.
        SQLAlchemy failures are wrapped in DatabaseError carrying the driver
        message; the session scope rolls the transaction back.
    """

    async def create_booking(self, db: AsyncSession, payload: BookingCreate) -> BookingOut:
        """
        Validate → INSERT → re-read a booking.

        Returns:
            The stored booking, including its id and created_at.

        Raises:
            ValidationError: name or email missing (→ 400)
            DatabaseError: statement failed (→ 500)
        """
        missing = missing_fields(payload, ("name", "email"))
        if missing:
            raise ValidationError(message="name and email are required", fields=missing)

        booking = Booking(
            name=payload.name,
            email=payload.email,
            phone=payload.phone or None,
            destination_id=payload.destination_id or None,
            guests=payload.guests or 1,
            start_date=payload.start_date or None,
            end_date=payload.end_date or None,
            notes=payload.notes or None,
        )
        try:
            db.add(booking)
            await db.flush()
            # created_at is assigned by SQLite; read the row back
            await db.refresh(booking)
            await db.commit()
        except SQLAlchemyError as e:
            raise database_error("create booking", e)

        logger.info(
            "Booking %s created (destination_id=%s, guests=%s)",
            booking.id,
            booking.destination_id,
            booking.guests,
        )
        return BookingOut.model_validate(booking)

    async def list_bookings(self, db: AsyncSession) -> List[BookingWithDestination]:
        """
        All bookings, newest first, each with its destination's name.

        Query:
            SELECT b.*, d.name AS destination_name
            FROM bookings b LEFT OUTER JOIN destinations d ON b.destination_id = d.id
            ORDER BY b.created_at DESC, b.id DESC
        """
        stmt = (
            select(Booking, Destination.name.label("destination_name"))
            .outerjoin(Destination, Booking.destination_id == Destination.id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        try:
            result = await db.execute(stmt)
            rows = result.all()
        except SQLAlchemyError as e:
            raise database_error("list bookings", e)

        return [
            BookingWithDestination.model_validate(booking).model_copy(
                update={"destination_name": destination_name}
            )
            for booking, destination_name in rows
        ]

    async def delete_booking(self, db: AsyncSession, raw_id: str) -> None:
        """
        Delete one booking by id.

        Raises:
            NotFoundError: no row matched, including malformed ids (→ 404)
            DatabaseError: DELETE failed (→ 500)
        """
        booking_id = parse_identifier(raw_id)
        if booking_id is None:
            raise NotFoundError(resource="booking", resource_id=raw_id)

        try:
            result = await db.execute(delete(Booking).where(Booking.id == booking_id))
            await db.commit()
        except SQLAlchemyError as e:
            raise database_error("delete booking", e)

        if result.rowcount == 0:
            raise NotFoundError(resource="booking", resource_id=raw_id)
        logger.info("Booking %s deleted", booking_id)


booking_service = BookingService()
