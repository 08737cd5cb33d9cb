"""SQLAlchemy implementations of repository interfaces."""

from .available_equipment import SqlAlchemyAvailableEquipmentRepository
from .equipment_type import SqlAlchemyEquipmentTypeRepository
from .rental_point import SqlAlchemyRentalPointRepository

__all__ = [
    "SqlAlchemyRentalPointRepository",
    "SqlAlchemyEquipmentTypeRepository",
    "SqlAlchemyAvailableEquipmentRepository",
]
