"""Unit tests for the SQLAlchemy repositories' statements and error translation."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from rental_inventory.core.exceptions import (
    DuplicateAddressError,
    DuplicateNameError,
    DuplicatePairError,
    InvalidReferenceError,
    ReferencedEntityError,
)
from rental_inventory.models import AvailableEquipment, EquipmentType, RentalPoint
from rental_inventory.repositories.sqlalchemy import (
    SqlAlchemyAvailableEquipmentRepository,
    SqlAlchemyEquipmentTypeRepository,
    SqlAlchemyRentalPointRepository,
)
from rental_inventory.repositories.sqlalchemy._integrity import constraint_name, matches_constraint

pytestmark = pytest.mark.unit


class _FakeScalars:
    def __init__(self, rows: list) -> None:
        self._rows = rows

    def all(self) -> list:
        return self._rows


class _DriverError(Exception):
    def __init__(self, message: str, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint_name = constraint


def _integrity_error(constraint: str | None, message: str = "integrity") -> IntegrityError:
    return IntegrityError("INSERT ...", {}, _DriverError(message, constraint))


def _session(rows: list | None = None) -> AsyncMock:
    session = AsyncMock()
    session.add = MagicMock()
    session.scalars.return_value = _FakeScalars(rows or [])
    return session


def _where(session: AsyncMock, method: str = "scalars") -> set[str]:
    stmt = getattr(session, method).await_args.args[0]
    return {str(clause) for clause in stmt._where_criteria}


@pytest.mark.asyncio
async def test_name_search_ignores_case_and_orders_by_id() -> None:
    point = RentalPoint(id=1, name="Absolut Sport", address="A", opening_hours="9-21")
    session = _session([point])
    repo = SqlAlchemyRentalPointRepository(session)

    result = await repo.search_by_name("absolut")

    assert result == [point]
    stmt = session.scalars.await_args.args[0]
    assert any("lower(rental_points.name)" in clause for clause in _where(session))
    assert [str(c) for c in stmt._order_by_clauses] == ["rental_points.id ASC"]


@pytest.mark.asyncio
async def test_opening_hours_search_is_case_sensitive() -> None:
    session = _session()
    repo = SqlAlchemyRentalPointRepository(session)

    await repo.search_by_opening_hours("Mon")

    (clause,) = _where(session)
    assert "rental_points.opening_hours LIKE" in clause
    assert "lower(" not in clause


@pytest.mark.asyncio
async def test_exists_by_address_and_count() -> None:
    session = _session()
    repo = SqlAlchemyRentalPointRepository(session)

    session.scalar.return_value = True
    assert await repo.exists_by_address("123 Main St") is True

    session.scalar.return_value = None
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_add_translates_address_violation() -> None:
    session = _session()
    session.flush.side_effect = _integrity_error("uq_rental_points_address")
    repo = SqlAlchemyRentalPointRepository(session)

    with pytest.raises(DuplicateAddressError):
        await repo.add(RentalPoint(name="n", address="X", opening_hours="h"))
    session.add.assert_called_once()


@pytest.mark.asyncio
async def test_add_reraises_unrelated_integrity_errors() -> None:
    session = _session()
    session.flush.side_effect = _integrity_error("some_other_constraint")
    repo = SqlAlchemyRentalPointRepository(session)

    with pytest.raises(IntegrityError):
        await repo.add(RentalPoint(name="n", address="X", opening_hours="h"))


@pytest.mark.asyncio
async def test_delete_translates_foreign_key_violation() -> None:
    session = _session()
    session.flush.side_effect = _integrity_error("fk_available_equipment_rental_point")
    repo = SqlAlchemyRentalPointRepository(session)
    point = RentalPoint(id=4, name="n", address="X", opening_hours="h")

    with pytest.raises(ReferencedEntityError) as exc_info:
        await repo.delete(point)

    assert exc_info.value.entity_id == 4
    session.delete.assert_awaited_once_with(point)


@pytest.mark.asyncio
async def test_type_name_checks_compare_lowercase() -> None:
    session = _session()
    session.scalar.return_value = False
    repo = SqlAlchemyEquipmentTypeRepository(session)

    assert await repo.exists_by_type_name("Bike") is False

    stmt = session.scalar.await_args.args[0]
    assert "lower(equipment_types.type_name)" in str(stmt)


@pytest.mark.asyncio
async def test_type_save_translates_name_violation() -> None:
    session = _session()
    session.flush.side_effect = _integrity_error("uq_equipment_types_type_name_lower")
    repo = SqlAlchemyEquipmentTypeRepository(session)

    with pytest.raises(DuplicateNameError):
        await repo.save(EquipmentType(id=1, type_name="Bike", category="Bikes"))


@pytest.mark.asyncio
async def test_category_search_ignores_case() -> None:
    session = _session()
    repo = SqlAlchemyEquipmentTypeRepository(session)

    await repo.search_by_category("bikes")

    assert any("lower(equipment_types.category)" in clause for clause in _where(session))


@pytest.mark.asyncio
async def test_get_for_update_locks_and_refreshes_row() -> None:
    session = _session()
    repo = SqlAlchemyAvailableEquipmentRepository(session)

    await repo.get_for_update(3)

    stmt = session.scalar.await_args.args[0]
    assert stmt._for_update_arg is not None
    assert stmt.get_execution_options().get("populate_existing") is True
    assert any("available_equipment.id" in clause for clause in _where(session, "scalar"))


@pytest.mark.asyncio
async def test_available_above_filters_strictly_greater() -> None:
    session = _session()
    repo = SqlAlchemyAvailableEquipmentRepository(session)

    await repo.find_with_available_above(0)

    (clause,) = _where(session)
    assert "available_equipment.available_count >" in clause


@pytest.mark.asyncio
async def test_count_with_available_above_returns_int() -> None:
    session = _session()
    session.scalar.return_value = 5
    repo = SqlAlchemyAvailableEquipmentRepository(session)

    assert await repo.count_with_available_above(0) == 5


@pytest.mark.asyncio
async def test_find_by_pair_filters_on_both_ids() -> None:
    session = _session()
    session.scalar.return_value = None
    repo = SqlAlchemyAvailableEquipmentRepository(session)

    assert await repo.find_by_pair(1, 2) is None

    clauses = _where(session, "scalar")
    assert any("available_equipment.rental_point_id" in c for c in clauses)
    assert any("available_equipment.equipment_type_id" in c for c in clauses)


@pytest.mark.asyncio
async def test_inventory_save_translates_pair_violation() -> None:
    session = _session()
    session.flush.side_effect = _integrity_error("uq_available_equipment_point_type")
    repo = SqlAlchemyAvailableEquipmentRepository(session)
    record = AvailableEquipment(
        rental_point_id=1, equipment_type_id=2, total_count=1, available_count=1, cost=1
    )

    with pytest.raises(DuplicatePairError) as exc_info:
        await repo.add(record)

    assert (exc_info.value.rental_point_id, exc_info.value.equipment_type_id) == (1, 2)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("constraint", "entity", "entity_id"),
    [
        ("fk_available_equipment_rental_point", "rental point", 1),
        ("fk_available_equipment_equipment_type", "equipment type", 2),
    ],
)
async def test_inventory_save_translates_foreign_key_violation(
    constraint: str, entity: str, entity_id: int
) -> None:
    session = _session()
    session.flush.side_effect = _integrity_error(constraint)
    repo = SqlAlchemyAvailableEquipmentRepository(session)
    record = AvailableEquipment(
        rental_point_id=1, equipment_type_id=2, total_count=1, available_count=1, cost=1
    )

    with pytest.raises(InvalidReferenceError) as exc_info:
        await repo.add(record)

    assert (exc_info.value.entity, exc_info.value.entity_id) == (entity, entity_id)
    assert exc_info.value.code == "invalid_reference"


def test_constraint_name_falls_back_to_message() -> None:
    exc = _integrity_error(
        None, 'duplicate key value violates unique constraint "uq_rental_points_address"'
    )

    assert constraint_name(exc) is None
    assert matches_constraint(exc, "uq_rental_points_address")
    assert not matches_constraint(exc, "uq_available_equipment_point_type")
