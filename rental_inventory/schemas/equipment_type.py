"""Request/response models for equipment types."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from rental_inventory.schemas.common import NON_BLANK

TypeName = Annotated[str, StringConstraints(pattern=NON_BLANK, max_length=100)]
Category = Annotated[str, StringConstraints(pattern=NON_BLANK, max_length=50)]
Description = Annotated[str, StringConstraints(max_length=500)]


class EquipmentTypeSearchType(str, Enum):
    type_name = "type_name"
    category = "category"


class EquipmentTypeIn(BaseModel):
    type_name: TypeName = Field(description="Name, unique regardless of letter case")
    category: Category = Field(description="Category, e.g. Bikes")
    description: Description | None = Field(default=None, description="Optional description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type_name": "Mountain Bike",
                "category": "Bikes",
                "description": "Hardtail, 21 speeds",
            }
        },
    )


class EquipmentTypeOut(BaseModel):
    id: int
    type_name: str
    category: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)
