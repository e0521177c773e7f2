"""
Sikkim Tourism Backend — Service Unit Tests
=============================================

What:  Service-level behavior with mock sessions (no real database).

What we test:
    ✅ Validation failures never touch the session
    ✅ Create = add → flush → refresh → commit, returning the refreshed row
    ✅ Driver errors become DatabaseError carrying the driver message
    ✅ Delete with rowcount 0 raises NotFoundError
    ✅ Identifier parsing, including the SQLite INTEGER upper bound
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from sikkim.exceptions import DatabaseError, NotFoundError, ValidationError
from sikkim.schemas import BookingCreate, ContactCreate, DestinationCreate
from sikkim.services.booking_service import BookingService
from sikkim.services.contact_service import ContactService
from sikkim.services.destination_service import DestinationService
from sikkim.services.validation import parse_identifier


def assign_server_defaults(obj):
    """Stand-in for session.refresh(): what SQLite would have filled in."""
    obj.id = 7
    obj.created_at = "2025-01-15 12:00:00"
    if hasattr(obj, "guests") and obj.guests is None:
        obj.guests = 1


class TestBookingServiceCreate:

    def setup_method(self):
        self.service = BookingService()

    @pytest.mark.asyncio
    async def test_missing_email_does_not_touch_session(self, mock_db_session):
        with pytest.raises(ValidationError, match="name and email are required") as exc_info:
            await self.service.create_booking(mock_db_session, BookingCreate(name="Pema"))

        assert exc_info.value.fields == ["email"]
        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_rereads_row(self, mock_db_session):
        mock_db_session.refresh.side_effect = assign_server_defaults

        result = await self.service.create_booking(
            mock_db_session,
            BookingCreate(name="Pema", email="pema@example.com", notes=""),
        )

        assert result.id == 7
        assert result.created_at == "2025-01-15 12:00:00"
        assert result.guests == 1
        assert result.notes is None
        mock_db_session.add.assert_called_once()
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.refresh.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_driver_error_becomes_database_error(self, mock_db_session):
        mock_db_session.flush.side_effect = OperationalError(
            "INSERT INTO bookings ...", {}, Exception("database is locked")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_booking(
                mock_db_session, BookingCreate(name="Pema", email="pema@example.com")
            )

        assert exc_info.value.message == "db error"
        assert exc_info.value.details == "database is locked"
        mock_db_session.commit.assert_not_awaited()


class TestBookingServiceDelete:

    def setup_method(self):
        self.service = BookingService()

    @pytest.mark.asyncio
    async def test_no_matching_row(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        with pytest.raises(NotFoundError):
            await self.service.delete_booking(mock_db_session, "12")

    @pytest.mark.asyncio
    async def test_matching_row(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        await self.service.delete_booking(mock_db_session, "12")

        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_malformed_id_skips_statement(self, mock_db_session):
        with pytest.raises(NotFoundError):
            await self.service.delete_booking(mock_db_session, "twelve")
        mock_db_session.execute.assert_not_awaited()


class TestDestinationService:

    def setup_method(self):
        self.service = DestinationService()

    @pytest.mark.asyncio
    async def test_get_missing(self, mock_db_session):
        mock_db_session.get.return_value = None

        with pytest.raises(NotFoundError):
            await self.service.get_destination(mock_db_session, "5")

    @pytest.mark.asyncio
    async def test_create_requires_name(self, mock_db_session):
        with pytest.raises(ValidationError, match="name required"):
            await self.service.create_destination(mock_db_session, DestinationCreate(region="North Sikkim"))
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_wraps_driver_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError(
            "SELECT ...", {}, Exception("unable to open database file")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_destinations(mock_db_session)
        assert "unable to open database file" in exc_info.value.details


class TestContactService:

    def setup_method(self):
        self.service = ContactService()

    @pytest.mark.asyncio
    async def test_missing_message(self, mock_db_session):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_contact(mock_db_session, ContactCreate(email="a@example.com"))

        assert exc_info.value.message == "email and message required"
        assert exc_info.value.fields == ["message"]


class TestParseIdentifier:

    @pytest.mark.parametrize(
        "raw, expected",
        [("1", 1), ("42", 42), ("007", 7), ("9223372036854775807", 2**63 - 1)],
    )
    def test_valid(self, raw, expected):
        assert parse_identifier(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "abc", "1.0", "-1", " 1", "1_000", "١", "9223372036854775808"]
    )
    def test_invalid(self, raw):
        assert parse_identifier(raw) is None
