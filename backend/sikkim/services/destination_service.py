"""
Sikkim Tourism Backend — Destination Service
==============================================

What:  List, fetch and create destinations.
How:   Each public method issues exactly one read or one INSERT (plus the
       re-read of the inserted row) against the session it is given.
Who:   Called by the routes in routes/destinations.py.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sikkim.exceptions import NotFoundError, ValidationError
from sikkim.models import Destination
from sikkim.schemas import DestinationCreate, DestinationOut
from sikkim.services.validation import database_error, missing_fields, parse_identifier

logger = logging.getLogger(__name__)


class DestinationService:
    """
    Stateless operations over the destinations table.

    Responsibilities:
        - list_destinations(): every destination, id ascending
        - get_destination(): one destination or NotFoundError
        - create_destination(): validate → insert → re-read
    """

    async def list_destinations(self, db: AsyncSession) -> List[DestinationOut]:
        try:
            result = await db.execute(select(Destination).order_by(Destination.id.asc()))
            destinations = result.scalars().all()
        except SQLAlchemyError as e:
            raise database_error("list destinations", e)
        return [DestinationOut.model_validate(d) for d in destinations]

    async def get_destination(self, db: AsyncSession, raw_id: str) -> DestinationOut:
        """
        Fetch a destination by the raw path segment.

        Malformed ids are not a separate error class: they simply match
        nothing and produce the same NotFoundError as an unknown id.
        """
        destination_id = parse_identifier(raw_id)
        if destination_id is None:
            raise NotFoundError(resource="destination", resource_id=raw_id)

        try:
            destination = await db.get(Destination, destination_id)
        except SQLAlchemyError as e:
            raise database_error("get destination", e)

        if destination is None:
            raise NotFoundError(resource="destination", resource_id=raw_id)
        return DestinationOut.model_validate(destination)

    async def create_destination(
        self, db: AsyncSession, payload: DestinationCreate
    ) -> DestinationOut:
        """
        Insert a destination and return the stored row.

        Raises:
            ValidationError: name missing (→ 400), before touching storage
            DatabaseError: INSERT or re-read failed (→ 500)
        """
        missing = missing_fields(payload, ("name",))
        if missing:
            raise ValidationError(message="name required", fields=missing)

        destination = Destination(
            name=payload.name,
            summary=payload.summary or None,
            details=payload.details or None,
            region=payload.region or None,
            image=payload.image or None,
        )
        try:
            db.add(destination)
            await db.flush()
            await db.refresh(destination)
            await db.commit()
        except SQLAlchemyError as e:
            raise database_error("create destination", e)

        logger.info("Destination %s created: %s", destination.id, destination.name)
        return DestinationOut.model_validate(destination)


destination_service = DestinationService()
