"""
Sikkim Tourism Backend — Destination Route Handlers
=====================================================

What:  Public destination catalogue plus the admin create endpoint.
Who:   The site's destination grid and detail pages; admin tooling for POST.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sikkim.database import get_db_session
from sikkim.routes.payload import parse_payload
from sikkim.schemas import DataResponse, DestinationCreate, DestinationOut, ErrorResponse
from sikkim.security import require_admin
from sikkim.services.destination_service import destination_service

router = APIRouter(prefix="/api", tags=["Destinations"])


@router.get(
    "/destinations",
    response_model=DataResponse[List[DestinationOut]],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all destinations",
)
async def list_destinations(
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[List[DestinationOut]]:
    """Every destination, ordered by id ascending."""
    destinations = await destination_service.list_destinations(db)
    return DataResponse[List[DestinationOut]](data=destinations)


@router.get(
    "/destinations/{destination_id}",
    response_model=DataResponse[DestinationOut],
    responses={
        404: {"description": "Destination not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Get a single destination",
)
async def get_destination(
    destination_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[DestinationOut]:
    """
    Args:
        destination_id: Taken as a raw string; a non-numeric value is a 404,
                        not a 422, because it cannot match any row.
    """
    destination = await destination_service.get_destination(db, destination_id)
    return DataResponse[DestinationOut](data=destination)


@router.post(
    "/destinations",
    status_code=201,
    response_model=DataResponse[DestinationOut],
    dependencies=[Depends(require_admin)],
    responses={
        400: {"description": "name missing", "model": ErrorResponse},
        401: {"description": "Missing or wrong admin token", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a destination (admin)",
)
async def create_destination(
    payload: DestinationCreate = Depends(parse_payload(DestinationCreate)),
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[DestinationOut]:
    destination = await destination_service.create_destination(db, payload)
    return DataResponse[DestinationOut](data=destination)
