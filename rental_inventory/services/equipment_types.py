from __future__ import annotations

from collections.abc import Callable

from rental_inventory.core.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    ReferencedEntityError,
)
from rental_inventory.infra.unit_of_work import UnitOfWork
from rental_inventory.logging import get_logger
from rental_inventory.models import EquipmentType
from rental_inventory.schemas.equipment_type import EquipmentTypeIn, EquipmentTypeSearchType

UnitOfWorkFactory = Callable[[], UnitOfWork]

ENTITY = "equipment type"

logger = get_logger(__name__)


class EquipmentCatalog:
    """CRUD and search over equipment types; names are unique ignoring case."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[EquipmentType]:
        async with self._uow_factory() as uow:
            return await uow.equipment_types.list_all()

    async def get_by_id(self, type_id: int) -> EquipmentType | None:
        async with self._uow_factory() as uow:
            return await uow.equipment_types.get_by_id(type_id)

    async def create(self, payload: EquipmentTypeIn) -> EquipmentType:
        async with self._uow_factory() as uow:
            if await uow.equipment_types.exists_by_type_name(payload.type_name):
                raise DuplicateNameError(payload.type_name)
            equipment_type = EquipmentType(
                type_name=payload.type_name,
                category=payload.category,
                description=payload.description,
            )
            await uow.equipment_types.add(equipment_type)
        logger.info("equipment_type_created", equipment_type_id=equipment_type.id)
        return equipment_type

    async def update(self, type_id: int, payload: EquipmentTypeIn) -> EquipmentType:
        async with self._uow_factory() as uow:
            equipment_type = await uow.equipment_types.get_by_id(type_id)
            if equipment_type is None:
                raise EntityNotFoundError(ENTITY, type_id)
            # Renaming "bike" to "Bike" is not a collision with itself
            renamed = payload.type_name.lower() != equipment_type.type_name.lower()
            if renamed and await uow.equipment_types.exists_by_type_name(payload.type_name):
                raise DuplicateNameError(payload.type_name)
            equipment_type.type_name = payload.type_name
            equipment_type.category = payload.category
            equipment_type.description = payload.description
            await uow.equipment_types.save(equipment_type)
        logger.info("equipment_type_updated", equipment_type_id=type_id)
        return equipment_type

    async def delete(self, type_id: int) -> None:
        async with self._uow_factory() as uow:
            equipment_type = await uow.equipment_types.get_by_id(type_id)
            if equipment_type is None:
                raise EntityNotFoundError(ENTITY, type_id)
            if await uow.inventory.exists_for_equipment_type(type_id):
                raise ReferencedEntityError(ENTITY, type_id)
            await uow.equipment_types.delete(equipment_type)
        logger.info("equipment_type_deleted", equipment_type_id=type_id)

    async def search_by_type_name(self, q: str) -> list[EquipmentType]:
        async with self._uow_factory() as uow:
            return await uow.equipment_types.search_by_type_name(q)

    async def search_by_category(self, q: str) -> list[EquipmentType]:
        async with self._uow_factory() as uow:
            return await uow.equipment_types.search_by_category(q)

    async def search(
        self, search_type: EquipmentTypeSearchType | None, q: str | None
    ) -> list[EquipmentType]:
        if q is None or not q.strip():
            return await self.list_all()
        if search_type == EquipmentTypeSearchType.category:
            return await self.search_by_category(q)
        return await self.search_by_type_name(q)

    async def count(self) -> int:
        async with self._uow_factory() as uow:
            return await uow.equipment_types.count()
