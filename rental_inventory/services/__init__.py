from .equipment_types import EquipmentCatalog
from .inventory import InventoryLedger
from .rental_points import RentalPointCatalog

__all__ = ["EquipmentCatalog", "InventoryLedger", "RentalPointCatalog"]
