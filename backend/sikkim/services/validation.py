"""
Sikkim Tourism Backend — Service Input Helpers
================================================

Presence checks and identifier parsing shared by the services.
"""

import logging
import re
from typing import Iterable, List, Optional

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from sikkim.database import SQLITE_INTEGER_MAX
from sikkim.exceptions import DatabaseError

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"[0-9]+", re.ASCII)


def missing_fields(payload: BaseModel, required: Iterable[str]) -> List[str]:
    """Names of required fields that are absent, null or empty strings."""
    return [name for name in required if not getattr(payload, name, None)]


def parse_identifier(raw_id: str) -> Optional[int]:
    """
    Convert a path segment to a row id.

    Returns None for anything that is not a plain decimal integer
    ("abc", "1.5", "-3", " 7") or that is too large to be a SQLite rowid;
    callers treat that as "no such row".
    """
    if raw_id is None or not _IDENTIFIER.fullmatch(raw_id):
        return None
    value = int(raw_id)
    if value > SQLITE_INTEGER_MAX:
        return None
    return value


def database_error(operation: str, exc: SQLAlchemyError) -> DatabaseError:
    """Log a failed statement and wrap it with the driver's message as details."""
    driver_error = getattr(exc, "orig", None) or exc
    logger.error("Database error during %s: %s", operation, driver_error, exc_info=True)
    return DatabaseError(
        details=str(driver_error),
        context={"operation": operation, "error_type": type(exc).__name__},
    )
