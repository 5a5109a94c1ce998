"""Pydantic model for travel place records."""

from pydantic import BaseModel, ConfigDict


class TravelPlace(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    destination: str | None = None
    country: str | None = None
    notes: str | None = None
    visited: str = "NO"
