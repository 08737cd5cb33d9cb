"""SQLAlchemy implementation of the equipment type repository."""

from __future__ import annotations

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rental_inventory.core.exceptions import DuplicateNameError, ReferencedEntityError
from rental_inventory.models import EquipmentType
from rental_inventory.models.available_equipment import EQUIPMENT_TYPE_FK
from rental_inventory.repositories.interfaces import EquipmentTypeRepository
from rental_inventory.repositories.sqlalchemy._integrity import flush_or_raise

TYPE_NAME_CONSTRAINT = "uq_equipment_types_type_name_lower"


class SqlAlchemyEquipmentTypeRepository(EquipmentTypeRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[EquipmentType]:
        stmt = select(EquipmentType).order_by(EquipmentType.id.asc())
        return list((await self._session.scalars(stmt)).all())

    async def get_by_id(self, type_id: int) -> EquipmentType | None:
        return await self._session.get(EquipmentType, type_id)

    async def exists_by_type_name(self, type_name: str) -> bool:
        stmt = select(
            exists().where(func.lower(EquipmentType.type_name) == func.lower(type_name))
        )
        return bool(await self._session.scalar(stmt))

    async def add(self, equipment_type: EquipmentType) -> EquipmentType:
        self._session.add(equipment_type)
        return await self.save(equipment_type)

    async def save(self, equipment_type: EquipmentType) -> EquipmentType:
        await flush_or_raise(
            self._session,
            {TYPE_NAME_CONSTRAINT: lambda: DuplicateNameError(equipment_type.type_name)},
        )
        return equipment_type

    async def delete(self, equipment_type: EquipmentType) -> None:
        await self._session.delete(equipment_type)
        await flush_or_raise(
            self._session,
            {EQUIPMENT_TYPE_FK: lambda: ReferencedEntityError("equipment type", equipment_type.id)},
        )

    async def search_by_type_name(self, q: str) -> list[EquipmentType]:
        stmt = (
            select(EquipmentType)
            .where(EquipmentType.type_name.icontains(q, autoescape=True))
            .order_by(EquipmentType.id.asc())
        )
        return list((await self._session.scalars(stmt)).all())

    async def search_by_category(self, q: str) -> list[EquipmentType]:
        stmt = (
            select(EquipmentType)
            .where(EquipmentType.category.icontains(q, autoescape=True))
            .order_by(EquipmentType.id.asc())
        )
        return list((await self._session.scalars(stmt)).all())

    async def count(self) -> int:
        count = await self._session.scalar(select(func.count()).select_from(EquipmentType))
        return int(count or 0)
