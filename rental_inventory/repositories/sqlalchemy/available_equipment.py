"""SQLAlchemy implementation of the inventory repository."""

from __future__ import annotations

from sqlalchemy import Select, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rental_inventory.core.exceptions import DuplicatePairError, InvalidReferenceError
from rental_inventory.models import AvailableEquipment
from rental_inventory.models.available_equipment import EQUIPMENT_TYPE_FK, RENTAL_POINT_FK
from rental_inventory.repositories.interfaces import AvailableEquipmentRepository
from rental_inventory.repositories.sqlalchemy._integrity import flush_or_raise

PAIR_CONSTRAINT = "uq_available_equipment_point_type"


def _ordered(stmt: Select) -> Select:
    return stmt.order_by(AvailableEquipment.id.asc())


class SqlAlchemyAvailableEquipmentRepository(AvailableEquipmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _all(self, stmt: Select) -> list[AvailableEquipment]:
        return list((await self._session.scalars(_ordered(stmt))).all())

    async def list_all(self) -> list[AvailableEquipment]:
        return await self._all(select(AvailableEquipment))

    async def get_by_id(self, record_id: int) -> AvailableEquipment | None:
        return await self._session.get(AvailableEquipment, record_id)

    async def get_for_update(self, record_id: int) -> AvailableEquipment | None:
        stmt = (
            select(AvailableEquipment)
            .where(AvailableEquipment.id == record_id)
            .with_for_update(of=AvailableEquipment)
            .execution_options(populate_existing=True)
        )
        return await self._session.scalar(stmt)

    async def add(self, record: AvailableEquipment) -> AvailableEquipment:
        self._session.add(record)
        return await self.save(record)

    async def save(self, record: AvailableEquipment) -> AvailableEquipment:
        # A referenced row deleted after the service checked it trips the FK
        await flush_or_raise(
            self._session,
            {
                PAIR_CONSTRAINT: lambda: DuplicatePairError(
                    record.rental_point_id, record.equipment_type_id
                ),
                RENTAL_POINT_FK: lambda: InvalidReferenceError(
                    "rental point", record.rental_point_id
                ),
                EQUIPMENT_TYPE_FK: lambda: InvalidReferenceError(
                    "equipment type", record.equipment_type_id
                ),
            },
        )
        return record

    async def delete(self, record: AvailableEquipment) -> None:
        await self._session.delete(record)
        await self._session.flush()

    async def exists_by_pair(self, rental_point_id: int, equipment_type_id: int) -> bool:
        stmt = select(
            exists().where(
                AvailableEquipment.rental_point_id == rental_point_id,
                AvailableEquipment.equipment_type_id == equipment_type_id,
            )
        )
        return bool(await self._session.scalar(stmt))

    async def exists_for_rental_point(self, rental_point_id: int) -> bool:
        stmt = select(exists().where(AvailableEquipment.rental_point_id == rental_point_id))
        return bool(await self._session.scalar(stmt))

    async def exists_for_equipment_type(self, equipment_type_id: int) -> bool:
        stmt = select(exists().where(AvailableEquipment.equipment_type_id == equipment_type_id))
        return bool(await self._session.scalar(stmt))

    async def find_by_rental_point(self, rental_point_id: int) -> list[AvailableEquipment]:
        return await self._all(
            select(AvailableEquipment).where(AvailableEquipment.rental_point_id == rental_point_id)
        )

    async def find_by_equipment_type(self, equipment_type_id: int) -> list[AvailableEquipment]:
        return await self._all(
            select(AvailableEquipment).where(
                AvailableEquipment.equipment_type_id == equipment_type_id
            )
        )

    async def find_by_pair(
        self, rental_point_id: int, equipment_type_id: int
    ) -> AvailableEquipment | None:
        stmt = select(AvailableEquipment).where(
            AvailableEquipment.rental_point_id == rental_point_id,
            AvailableEquipment.equipment_type_id == equipment_type_id,
        )
        return await self._session.scalar(stmt)

    async def find_with_available_above(self, threshold: int) -> list[AvailableEquipment]:
        return await self._all(
            select(AvailableEquipment).where(AvailableEquipment.available_count > threshold)
        )

    async def count(self) -> int:
        count = await self._session.scalar(select(func.count()).select_from(AvailableEquipment))
        return int(count or 0)

    async def count_with_available_above(self, threshold: int) -> int:
        stmt = (
            select(func.count())
            .select_from(AvailableEquipment)
            .where(AvailableEquipment.available_count > threshold)
        )
        count = await self._session.scalar(stmt)
        return int(count or 0)
