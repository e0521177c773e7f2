"""
Sikkim Tourism Backend — Destination SQLAlchemy Model
=======================================================

What:  ORM model for the `destinations` table (points of interest).
Who:   Seeded by the bootstrap routine; read by everyone; created by admins.

Table layout:
    id       INTEGER PRIMARY KEY AUTOINCREMENT
    name     TEXT NOT NULL
    summary  TEXT            short teaser shown on cards
    details  TEXT            long description
    region   TEXT            e.g. "East Sikkim"
    image    TEXT            site-relative image path, e.g. /images/tsomgo.jpg
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from sikkim.database import Base


class Destination(Base):
    """
    A tourism point of interest.

    Lifecycle:
        Created by seed data or POST /api/destinations; never updated or
        deleted. The id is immutable once assigned.
    """

    __tablename__ = "destinations"
    # AUTOINCREMENT keeps ids strictly increasing and never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    region: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Destination(id={self.id}, name='{self.name}')>"
