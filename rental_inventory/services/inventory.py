"""Inventory use cases: stock records per rental point and equipment type.

Every operation runs in its own unit of work. Reference checks, pair
uniqueness and the count invariant are validated here before anything is
written; the database constraints back them up against concurrent writers.
Rows whose counts change are read with a row lock (``get_for_update``).
"""

from __future__ import annotations

from collections.abc import Callable

from rental_inventory.core.exceptions import (
    DuplicatePairError,
    EntityNotFoundError,
    InvalidReferenceError,
)
from rental_inventory.infra.unit_of_work import UnitOfWork
from rental_inventory.logging import get_logger
from rental_inventory.models import AvailableEquipment, EquipmentType, RentalPoint
from rental_inventory.schemas.available_equipment import AvailableEquipmentIn

UnitOfWorkFactory = Callable[[], UnitOfWork]

ENTITY = "inventory record"

logger = get_logger(__name__)


async def _resolve_references(
    uow: UnitOfWork, payload: AvailableEquipmentIn
) -> tuple[RentalPoint, EquipmentType]:
    if payload.rental_point_id is None:
        raise InvalidReferenceError("rental point", None)
    point = await uow.rental_points.get_by_id(payload.rental_point_id)
    if point is None:
        raise InvalidReferenceError("rental point", payload.rental_point_id)

    if payload.equipment_type_id is None:
        raise InvalidReferenceError("equipment type", None)
    equipment_type = await uow.equipment_types.get_by_id(payload.equipment_type_id)
    if equipment_type is None:
        raise InvalidReferenceError("equipment type", payload.equipment_type_id)

    return point, equipment_type


async def _get_locked(uow: UnitOfWork, record_id: int) -> AvailableEquipment:
    record = await uow.inventory.get_for_update(record_id)
    if record is None:
        raise EntityNotFoundError(ENTITY, record_id)
    return record


class InventoryLedger:
    """CRUD, lookups and rent/return over inventory records."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[AvailableEquipment]:
        async with self._uow_factory() as uow:
            return await uow.inventory.list_all()

    async def get_by_id(self, record_id: int) -> AvailableEquipment | None:
        async with self._uow_factory() as uow:
            return await uow.inventory.get_by_id(record_id)

    async def count(self) -> int:
        async with self._uow_factory() as uow:
            return await uow.inventory.count()

    async def create(self, payload: AvailableEquipmentIn) -> AvailableEquipment:
        async with self._uow_factory() as uow:
            point, equipment_type = await _resolve_references(uow, payload)
            if await uow.inventory.exists_by_pair(point.id, equipment_type.id):
                raise DuplicatePairError(point.id, equipment_type.id)
            available_count = AvailableEquipment.resolve_available_count(
                payload.total_count, payload.available_count
            )
            record = AvailableEquipment(
                rental_point_id=point.id,
                equipment_type_id=equipment_type.id,
                rental_point=point,
                equipment_type=equipment_type,
                total_count=payload.total_count,
                available_count=available_count,
                cost=payload.cost,
            )
            await uow.inventory.add(record)
        logger.info(
            "inventory_record_created",
            record_id=record.id,
            rental_point_id=record.rental_point_id,
            equipment_type_id=record.equipment_type_id,
        )
        return record

    async def update(self, record_id: int, payload: AvailableEquipmentIn) -> AvailableEquipment:
        async with self._uow_factory() as uow:
            record = await _get_locked(uow, record_id)
            point, equipment_type = await _resolve_references(uow, payload)
            pair_changed = (
                point.id != record.rental_point_id
                or equipment_type.id != record.equipment_type_id
            )
            if pair_changed and await uow.inventory.exists_by_pair(point.id, equipment_type.id):
                raise DuplicatePairError(point.id, equipment_type.id)
            available_count = AvailableEquipment.resolve_available_count(
                payload.total_count, payload.available_count
            )
            record.rental_point_id = point.id
            record.equipment_type_id = equipment_type.id
            record.rental_point = point
            record.equipment_type = equipment_type
            record.total_count = payload.total_count
            record.available_count = available_count
            record.cost = payload.cost
            await uow.inventory.save(record)
        logger.info("inventory_record_updated", record_id=record_id)
        return record

    async def delete(self, record_id: int) -> None:
        async with self._uow_factory() as uow:
            record = await uow.inventory.get_by_id(record_id)
            if record is None:
                raise EntityNotFoundError(ENTITY, record_id)
            await uow.inventory.delete(record)
        logger.info("inventory_record_deleted", record_id=record_id)

    async def find_by_rental_point(self, rental_point_id: int) -> list[AvailableEquipment]:
        async with self._uow_factory() as uow:
            return await uow.inventory.find_by_rental_point(rental_point_id)

    async def find_by_equipment_type(self, equipment_type_id: int) -> list[AvailableEquipment]:
        async with self._uow_factory() as uow:
            return await uow.inventory.find_by_equipment_type(equipment_type_id)

    async def find_by_point_and_type(
        self, rental_point_id: int, equipment_type_id: int
    ) -> AvailableEquipment | None:
        async with self._uow_factory() as uow:
            return await uow.inventory.find_by_pair(rental_point_id, equipment_type_id)

    async def find_with_available_above(self, threshold: int) -> list[AvailableEquipment]:
        async with self._uow_factory() as uow:
            return await uow.inventory.find_with_available_above(threshold)

    async def is_available(self, record_id: int) -> bool:
        record = await self.get_by_id(record_id)
        return record is not None and record.is_available

    async def count_with_stock(self) -> int:
        async with self._uow_factory() as uow:
            return await uow.inventory.count_with_available_above(0)

    async def rent(self, record_id: int, quantity: int) -> AvailableEquipment:
        async with self._uow_factory() as uow:
            record = await _get_locked(uow, record_id)
            record.rent(quantity)
            await uow.inventory.save(record)
        logger.info(
            "equipment_rented",
            record_id=record_id,
            quantity=quantity,
            available_count=record.available_count,
        )
        return record

    async def return_(self, record_id: int, quantity: int) -> AvailableEquipment:
        async with self._uow_factory() as uow:
            record = await _get_locked(uow, record_id)
            record.return_(quantity)
            await uow.inventory.save(record)
        logger.info(
            "equipment_returned",
            record_id=record_id,
            quantity=quantity,
            available_count=record.available_count,
        )
        return record
