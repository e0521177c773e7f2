"""
Sikkim Tourism Backend — Contact Message SQLAlchemy Model
===========================================================

What:  ORM model for the `contacts` table (free-form inquiries).
Who:   Created by POST /api/contact; listed by admins.

email and message are nullable in the schema; the service layer is what
requires them.
"""

from typing import Optional

from sqlalchemy import Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from sikkim.database import Base


class Contact(Base):
    """A guest-submitted inquiry. Never updated or deleted."""

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[str] = mapped_column(
        Text,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_contacts_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email='{self.email}', created_at='{self.created_at}')>"
