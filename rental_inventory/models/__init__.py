# rental_inventory/models/__init__.py
# Imported as a whole so Alembic autogenerate sees every table.
from .available_equipment import AvailableEquipment
from .base import Base
from .equipment_type import EquipmentType
from .rental_point import RentalPoint

__all__ = [
    "Base",
    "RentalPoint",
    "EquipmentType",
    "AvailableEquipment",
]
