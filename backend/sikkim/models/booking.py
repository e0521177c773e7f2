"""
Sikkim Tourism Backend — Booking SQLAlchemy Model
===================================================

What:  ORM model for the `bookings` table (guest reservation requests).
Who:   Created by POST /api/bookings; listed and deleted by admins.

Table Design:
    - destination_id declares a foreign key to destinations.id, but SQLite does
      not enforce it (see database.py); dangling references are stored as-is.
    - guests defaults to 1 both in Python and in the schema.
    - start_date / end_date are free-form date strings supplied by the guest.
    - created_at is assigned by SQLite (CURRENT_TIMESTAMP, UTC, second
      resolution) and read back after insert.

Index on created_at:
    Serves the admin listing, which is ordered newest first.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from sikkim.database import Base


class Booking(Base):
    """
    A guest's reservation request.

    Lifecycle:
        1. Created by a public POST (name and email required)
        2. Listed by admins, joined with the destination name
        3. Optionally deleted by an admin; never updated
    """

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    destination_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("destinations.id"),
        nullable=True,
    )
    guests: Mapped[int] = mapped_column(
        Integer,
        default=1,
        server_default=text("1"),
    )
    start_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    end_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[str] = mapped_column(
        Text,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_bookings_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, email='{self.email}', "
            f"destination_id={self.destination_id}, created_at='{self.created_at}')>"
        )
