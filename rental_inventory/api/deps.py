"""API dependency helpers and service providers."""

from rental_inventory import db
from rental_inventory.infra.unit_of_work import SqlAlchemyUnitOfWork
from rental_inventory.services.equipment_types import EquipmentCatalog
from rental_inventory.services.health import HealthService
from rental_inventory.services.inventory import InventoryLedger
from rental_inventory.services.rental_points import RentalPointCatalog

__all__ = [
    "get_rental_point_catalog",
    "get_equipment_catalog",
    "get_inventory_ledger",
    "get_health_service",
]


def _uow_factory() -> SqlAlchemyUnitOfWork:
    # Resolved per call so that db.configure_engine() takes effect
    return SqlAlchemyUnitOfWork(db.SessionLocal)


def get_rental_point_catalog() -> RentalPointCatalog:
    return RentalPointCatalog(_uow_factory)


def get_equipment_catalog() -> EquipmentCatalog:
    return EquipmentCatalog(_uow_factory)


def get_inventory_ledger() -> InventoryLedger:
    return InventoryLedger(_uow_factory)


def get_health_service() -> HealthService:
    return HealthService(db.SessionLocal)
