"""
Sikkim Tourism Backend — Contact Service
==========================================

What:  Store and list contact messages.
Who:   Called by the routes in routes/contacts.py.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sikkim.exceptions import ValidationError
from sikkim.models import Contact
from sikkim.schemas import ContactCreate, ContactOut
from sikkim.services.validation import database_error, missing_fields

logger = logging.getLogger(__name__)


class ContactService:

    async def create_contact(self, db: AsyncSession, payload: ContactCreate) -> ContactOut:
        """Validate → INSERT → re-read. email and message are required."""
        missing = missing_fields(payload, ("email", "message"))
        if missing:
            raise ValidationError(message="email and message required", fields=missing)

        contact = Contact(
            name=payload.name or None,
            email=payload.email,
            message=payload.message,
        )
        try:
            db.add(contact)
            await db.flush()
            await db.refresh(contact)
            await db.commit()
        except SQLAlchemyError as e:
            raise database_error("create contact", e)

        logger.info("Contact message %s stored", contact.id)
        return ContactOut.model_validate(contact)

    async def list_contacts(self, db: AsyncSession) -> List[ContactOut]:
        """All contact messages, newest first (id breaks same-second ties)."""
        try:
            result = await db.execute(
                select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
            )
            contacts = result.scalars().all()
        except SQLAlchemyError as e:
            raise database_error("list contacts", e)
        return [ContactOut.model_validate(c) for c in contacts]


contact_service = ContactService()
