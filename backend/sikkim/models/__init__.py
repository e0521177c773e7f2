"""
Sikkim Tourism Backend — ORM Models
=====================================

Importing this package registers every table with `Base.metadata`, which the
bootstrap routine uses to create the schema.
"""

from sikkim.models.booking import Booking
from sikkim.models.contact import Contact
from sikkim.models.destination import Destination

__all__ = ["Booking", "Contact", "Destination"]
