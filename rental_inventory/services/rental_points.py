"""Rental point use cases backed by repository interfaces."""

from __future__ import annotations

from collections.abc import Callable

from rental_inventory.core.exceptions import (
    DuplicateAddressError,
    EntityNotFoundError,
    ReferencedEntityError,
)
from rental_inventory.infra.unit_of_work import UnitOfWork
from rental_inventory.logging import get_logger
from rental_inventory.models import RentalPoint
from rental_inventory.schemas.rental_point import RentalPointIn, RentalPointSearchType

UnitOfWorkFactory = Callable[[], UnitOfWork]

ENTITY = "rental point"

logger = get_logger(__name__)


class RentalPointCatalog:
    """CRUD and substring search over rental points.

    Addresses are unique under exact (case-sensitive) comparison.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[RentalPoint]:
        async with self._uow_factory() as uow:
            return await uow.rental_points.list_all()

    async def get_by_id(self, point_id: int) -> RentalPoint | None:
        async with self._uow_factory() as uow:
            return await uow.rental_points.get_by_id(point_id)

    async def create(self, payload: RentalPointIn) -> RentalPoint:
        async with self._uow_factory() as uow:
            if await uow.rental_points.exists_by_address(payload.address):
                raise DuplicateAddressError(payload.address)
            point = RentalPoint(
                name=payload.name,
                address=payload.address,
                opening_hours=payload.opening_hours,
            )
            await uow.rental_points.add(point)
        logger.info("rental_point_created", rental_point_id=point.id)
        return point

    async def update(self, point_id: int, payload: RentalPointIn) -> RentalPoint:
        async with self._uow_factory() as uow:
            point = await uow.rental_points.get_by_id(point_id)
            if point is None:
                raise EntityNotFoundError(ENTITY, point_id)
            if payload.address != point.address and await uow.rental_points.exists_by_address(
                payload.address
            ):
                raise DuplicateAddressError(payload.address)
            point.name = payload.name
            point.address = payload.address
            point.opening_hours = payload.opening_hours
            await uow.rental_points.save(point)
        logger.info("rental_point_updated", rental_point_id=point_id)
        return point

    async def delete(self, point_id: int) -> None:
        async with self._uow_factory() as uow:
            point = await uow.rental_points.get_by_id(point_id)
            if point is None:
                raise EntityNotFoundError(ENTITY, point_id)
            if await uow.inventory.exists_for_rental_point(point_id):
                raise ReferencedEntityError(ENTITY, point_id)
            await uow.rental_points.delete(point)
        logger.info("rental_point_deleted", rental_point_id=point_id)

    async def search_by_name(self, q: str) -> list[RentalPoint]:
        async with self._uow_factory() as uow:
            return await uow.rental_points.search_by_name(q)

    async def search_by_address(self, q: str) -> list[RentalPoint]:
        async with self._uow_factory() as uow:
            return await uow.rental_points.search_by_address(q)

    async def search_by_opening_hours(self, q: str) -> list[RentalPoint]:
        async with self._uow_factory() as uow:
            return await uow.rental_points.search_by_opening_hours(q)

    async def search(
        self, search_type: RentalPointSearchType | None, q: str | None
    ) -> list[RentalPoint]:
        """Dispatch a search by field; a blank query lists every rental point."""
        if q is None or not q.strip():
            return await self.list_all()
        if search_type == RentalPointSearchType.address:
            return await self.search_by_address(q)
        if search_type == RentalPointSearchType.opening_hours:
            return await self.search_by_opening_hours(q)
        return await self.search_by_name(q)

    async def count(self) -> int:
        async with self._uow_factory() as uow:
            return await uow.rental_points.count()
