"""SQLAlchemy implementation of the rental point repository."""

from __future__ import annotations

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rental_inventory.core.exceptions import DuplicateAddressError, ReferencedEntityError
from rental_inventory.models import RentalPoint
from rental_inventory.models.available_equipment import RENTAL_POINT_FK
from rental_inventory.repositories.interfaces import RentalPointRepository
from rental_inventory.repositories.sqlalchemy._integrity import flush_or_raise

ADDRESS_CONSTRAINT = "uq_rental_points_address"


class SqlAlchemyRentalPointRepository(RentalPointRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[RentalPoint]:
        stmt = select(RentalPoint).order_by(RentalPoint.id.asc())
        return list((await self._session.scalars(stmt)).all())

    async def get_by_id(self, point_id: int) -> RentalPoint | None:
        return await self._session.get(RentalPoint, point_id)

    async def exists_by_address(self, address: str) -> bool:
        stmt = select(exists().where(RentalPoint.address == address))
        return bool(await self._session.scalar(stmt))

    async def add(self, point: RentalPoint) -> RentalPoint:
        self._session.add(point)
        return await self.save(point)

    async def save(self, point: RentalPoint) -> RentalPoint:
        await flush_or_raise(
            self._session, {ADDRESS_CONSTRAINT: lambda: DuplicateAddressError(point.address)}
        )
        return point

    async def delete(self, point: RentalPoint) -> None:
        await self._session.delete(point)
        await flush_or_raise(
            self._session,
            {RENTAL_POINT_FK: lambda: ReferencedEntityError("rental point", point.id)},
        )

    async def search_by_name(self, q: str) -> list[RentalPoint]:
        stmt = (
            select(RentalPoint)
            .where(RentalPoint.name.icontains(q, autoescape=True))
            .order_by(RentalPoint.id.asc())
        )
        return list((await self._session.scalars(stmt)).all())

    async def search_by_address(self, q: str) -> list[RentalPoint]:
        stmt = (
            select(RentalPoint)
            .where(RentalPoint.address.icontains(q, autoescape=True))
            .order_by(RentalPoint.id.asc())
        )
        return list((await self._session.scalars(stmt)).all())

    async def search_by_opening_hours(self, q: str) -> list[RentalPoint]:
        # case-sensitive on purpose, unlike name/address
        stmt = (
            select(RentalPoint)
            .where(RentalPoint.opening_hours.contains(q, autoescape=True))
            .order_by(RentalPoint.id.asc())
        )
        return list((await self._session.scalars(stmt)).all())

    async def count(self) -> int:
        count = await self._session.scalar(select(func.count()).select_from(RentalPoint))
        return int(count or 0)
