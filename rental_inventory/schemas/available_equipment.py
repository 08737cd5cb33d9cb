"""Request/response models for inventory records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rental_inventory.schemas.common import PG_INT_MAX, PG_INT_MIN


class AvailableEquipmentIn(BaseModel):
    rental_point_id: int | None = Field(
        default=None, ge=PG_INT_MIN, le=PG_INT_MAX, description="Rental point id"
    )
    equipment_type_id: int | None = Field(
        default=None, ge=PG_INT_MIN, le=PG_INT_MAX, description="Equipment type id"
    )
    total_count: int = Field(ge=0, le=PG_INT_MAX, description="Units owned by the rental point")
    available_count: int | None = Field(
        default=None,
        ge=0,
        le=PG_INT_MAX,
        description="Units not rented out; defaults to total_count",
    )
    cost: int = Field(ge=1, le=PG_INT_MAX, description="Rental price per hour")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rental_point_id": 1,
                "equipment_type_id": 1,
                "total_count": 10,
                "cost": 100,
            }
        },
    )


class QuantityRequest(BaseModel):
    # Sign is checked by the service so that it can report invalid_quantity
    quantity: int = Field(description="Number of units to rent or return")


class RentalPointRef(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class EquipmentTypeRef(BaseModel):
    id: int
    type_name: str

    model_config = ConfigDict(from_attributes=True)


class AvailableEquipmentOut(BaseModel):
    id: int
    rental_point: RentalPointRef
    equipment_type: EquipmentTypeRef
    total_count: int
    available_count: int
    cost: int
    cost_unit: str
    is_available: bool

    model_config = ConfigDict(from_attributes=True)


class AvailabilityResponse(BaseModel):
    id: int
    available: bool


class InventoryStats(BaseModel):
    total: int = Field(ge=0, description="All inventory records")
    with_stock: int = Field(ge=0, description="Records with at least one available unit")
