"""Request/response models for rental points."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from rental_inventory.schemas.common import NON_BLANK

PointName = Annotated[str, StringConstraints(pattern=NON_BLANK, max_length=200)]
Address = Annotated[str, StringConstraints(pattern=NON_BLANK, max_length=300)]
OpeningHours = Annotated[str, StringConstraints(pattern=NON_BLANK, max_length=500)]


class RentalPointSearchType(str, Enum):
    name = "name"
    address = "address"
    opening_hours = "opening_hours"


class RentalPointIn(BaseModel):
    name: PointName = Field(description="Display name of the rental point")
    address: Address = Field(description="Street address, unique across rental points")
    opening_hours: OpeningHours = Field(description="Free-text opening hours")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Absolut Sport",
                "address": "123 Main St",
                "opening_hours": "9-21",
            }
        },
    )


class RentalPointOut(BaseModel):
    id: int
    name: str
    address: str
    opening_hours: str

    model_config = ConfigDict(from_attributes=True)
