from .available_equipment import (
    AvailabilityResponse,
    AvailableEquipmentIn,
    AvailableEquipmentOut,
    InventoryStats,
    QuantityRequest,
)
from .common import CountResponse, ErrorResponse, OkResponse
from .equipment_type import EquipmentTypeIn, EquipmentTypeOut, EquipmentTypeSearchType
from .rental_point import RentalPointIn, RentalPointOut, RentalPointSearchType

__all__ = [
    "AvailabilityResponse",
    "AvailableEquipmentIn",
    "AvailableEquipmentOut",
    "CountResponse",
    "EquipmentTypeIn",
    "EquipmentTypeOut",
    "EquipmentTypeSearchType",
    "ErrorResponse",
    "InventoryStats",
    "OkResponse",
    "QuantityRequest",
    "RentalPointIn",
    "RentalPointOut",
    "RentalPointSearchType",
]
