"""
Sikkim Tourism Backend — Booking Route Handlers
=================================================

What:  Public booking submission; admin listing and deletion.
Who:   The site's booking form (POST) and the admin dashboard (GET, DELETE).

Request Flow (POST /api/bookings):
    1. Body is read as JSON or form data (routes/payload.py)
    2. BookingService validates name/email, inserts, re-reads
    3. 201 Created with {"data": <booking>}
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sikkim.database import get_db_session
from sikkim.routes.payload import parse_payload
from sikkim.schemas import (
    BookingCreate,
    BookingOut,
    BookingWithDestination,
    DataResponse,
    ErrorResponse,
    SuccessResponse,
)
from sikkim.security import require_admin
from sikkim.services.booking_service import booking_service

router = APIRouter(prefix="/api", tags=["Bookings"])


@router.post(
    "/bookings",
    status_code=201,
    response_model=DataResponse[BookingOut],
    responses={
        400: {"description": "name or email missing", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Submit a booking request",
)
async def create_booking(
    payload: BookingCreate = Depends(parse_payload(BookingCreate)),
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[BookingOut]:
    booking = await booking_service.create_booking(db, payload)
    return DataResponse[BookingOut](data=booking)


@router.get(
    "/bookings",
    response_model=DataResponse[List[BookingWithDestination]],
    dependencies=[Depends(require_admin)],
    responses={
        401: {"description": "Missing or wrong admin token", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List bookings, newest first (admin)",
)
async def list_bookings(
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[List[BookingWithDestination]]:
    bookings = await booking_service.list_bookings(db)
    return DataResponse[List[BookingWithDestination]](data=bookings)


@router.delete(
    "/bookings/{booking_id}",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    responses={
        401: {"description": "Missing or wrong admin token", "model": ErrorResponse},
        404: {"description": "Booking not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Delete a booking (admin)",
)
async def delete_booking(
    booking_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await booking_service.delete_booking(db, booking_id)
    return SuccessResponse(success=True)
