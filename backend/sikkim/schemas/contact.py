"""Contact message request and response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """Body of POST /api/contact. email and message are checked by ContactService."""
    name: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None, description="Reply-to address (required)")
    message: Optional[str] = Field(default=None, description="Inquiry text (required)")

    model_config = {"coerce_numbers_to_str": True}


class ContactOut(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    created_at: str

    model_config = {"from_attributes": True}
