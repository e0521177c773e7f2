"""
Sikkim Tourism Backend — Contact Message Route Handlers
=========================================================

What:  POST /api/contact stores an inquiry; GET /api/contacts lists them (admin).
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sikkim.database import get_db_session
from sikkim.routes.payload import parse_payload
from sikkim.schemas import ContactCreate, ContactOut, DataResponse, ErrorResponse
from sikkim.security import require_admin
from sikkim.services.contact_service import contact_service

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post(
    "/contact",
    status_code=201,
    response_model=DataResponse[ContactOut],
    responses={
        400: {"description": "email or message missing", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Send a contact message",
)
async def create_contact(
    payload: ContactCreate = Depends(parse_payload(ContactCreate)),
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[ContactOut]:
    contact = await contact_service.create_contact(db, payload)
    return DataResponse[ContactOut](data=contact)


@router.get(
    "/contacts",
    response_model=DataResponse[List[ContactOut]],
    dependencies=[Depends(require_admin)],
    responses={
        401: {"description": "Missing or wrong admin token", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List contact messages, newest first (admin)",
)
async def list_contacts(
    db: AsyncSession = Depends(get_db_session),
) -> DataResponse[List[ContactOut]]:
    contacts = await contact_service.list_contacts(db)
    return DataResponse[List[ContactOut]](data=contacts)
