"""Destination request and response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class DestinationCreate(BaseModel):
    """
    Body of POST /api/destinations.

    `name` is required, but presence is checked by DestinationService so the
    client gets {"error": "name required"} instead of a schema error.
    """
    name: Optional[str] = Field(default=None, description="Destination name (required)")
    summary: Optional[str] = Field(default=None, description="Short teaser")
    details: Optional[str] = Field(default=None, description="Long description")
    region: Optional[str] = Field(default=None, description="Region, e.g. 'East Sikkim'")
    image: Optional[str] = Field(default=None, description="Image path or URL")

    model_config = {"coerce_numbers_to_str": True}


class DestinationOut(BaseModel):
    id: int
    name: str
    summary: Optional[str] = None
    details: Optional[str] = None
    region: Optional[str] = None
    image: Optional[str] = None

    model_config = {"from_attributes": True}
