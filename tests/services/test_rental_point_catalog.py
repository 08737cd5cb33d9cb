"""Service tests for RentalPointCatalog over the in-memory unit of work."""

from __future__ import annotations

import pytest

from rental_inventory.core.exceptions import (
    DuplicateAddressError,
    EntityNotFoundError,
    ReferencedEntityError,
)
from rental_inventory.models import AvailableEquipment
from rental_inventory.schemas import RentalPointIn, RentalPointSearchType

pytestmark = pytest.mark.asyncio


def _point(name: str = "Absolut Sport", address: str = "123 Main St", hours: str = "9-21"):
    return RentalPointIn(name=name, address=address, opening_hours=hours)


async def test_create_assigns_id_and_persists(points, store) -> None:
    point = await points.create(_point())

    assert point.id == 1
    assert store.rental_points[1].name == "Absolut Sport"
    assert store.commits == 1
    assert (await points.get_by_id(1)).address == "123 Main St"


async def test_duplicate_address_is_rejected(points, store) -> None:
    await points.create(_point(address="X"))

    with pytest.raises(DuplicateAddressError) as exc_info:
        await points.create(_point(name="Other", address="X"))

    assert exc_info.value.code == "duplicate_address"
    assert len(store.rental_points) == 1
    assert store.rollbacks == 1


async def test_address_uniqueness_is_case_sensitive(points) -> None:
    await points.create(_point(address="X"))
    second = await points.create(_point(address="x"))

    assert second.id == 2
    assert await points.count() == 2


async def test_trailing_whitespace_makes_a_distinct_address(points, store) -> None:
    await points.create(_point(address="X"))
    second = await points.create(_point(address="X "))

    assert second.address == "X "
    assert store.rental_points[2].address == "X "


async def test_get_by_id_returns_none_when_missing(points) -> None:
    assert await points.get_by_id(42) is None


async def test_update_replaces_fields(points) -> None:
    created = await points.create(_point())

    updated = await points.update(
        created.id, _point(name="Renamed", address="1 New Rd", hours="10-18")
    )

    assert updated.id == created.id
    assert (updated.name, updated.address, updated.opening_hours) == (
        "Renamed",
        "1 New Rd",
        "10-18",
    )


async def test_update_keeping_own_address_is_not_a_duplicate(points) -> None:
    created = await points.create(_point())

    updated = await points.update(created.id, _point(name="Renamed"))

    assert updated.name == "Renamed"


async def test_update_to_address_of_another_point_fails(points) -> None:
    await points.create(_point(address="A"))
    second = await points.create(_point(address="B"))

    with pytest.raises(DuplicateAddressError):
        await points.update(second.id, _point(address="A"))
    assert (await points.get_by_id(second.id)).address == "B"


async def test_update_missing_point_raises_not_found(points) -> None:
    with pytest.raises(EntityNotFoundError) as exc_info:
        await points.update(7, _point())
    assert exc_info.value.entity_id == 7


async def test_delete_removes_point(points) -> None:
    created = await points.create(_point())

    await points.delete(created.id)

    assert await points.get_by_id(created.id) is None
    assert await points.count() == 0


async def test_delete_missing_point_raises_not_found(points) -> None:
    with pytest.raises(EntityNotFoundError):
        await points.delete(3)


async def test_delete_referenced_point_is_restricted(points, store) -> None:
    created = await points.create(_point())
    store.inventory[1] = AvailableEquipment(
        id=1,
        rental_point_id=created.id,
        equipment_type_id=1,
        total_count=1,
        available_count=1,
        cost=1,
    )

    with pytest.raises(ReferencedEntityError) as exc_info:
        await points.delete(created.id)

    assert exc_info.value.code == "restrict_delete"
    assert created.id in store.rental_points


async def test_search_by_name_and_address_ignore_case(points) -> None:
    await points.create(_point(name="Absolut Sport", address="123 Main St"))
    await points.create(_point(name="Lakeside", address="7 Harbour Rd"))

    assert [p.name for p in await points.search_by_name("absolut")] == ["Absolut Sport"]
    assert [p.name for p in await points.search_by_address("HARBOUR")] == ["Lakeside"]


async def test_search_by_opening_hours_is_case_sensitive(points) -> None:
    await points.create(_point(address="A", hours="Mon-Fri 9-21"))

    assert len(await points.search_by_opening_hours("Mon")) == 1
    assert await points.search_by_opening_hours("mon") == []


async def test_search_dispatch_defaults_to_name_and_blank_lists_all(points) -> None:
    await points.create(_point(name="Alpha", address="A"))
    await points.create(_point(name="Beta", address="B"))

    assert [p.name for p in await points.search(None, "alp")] == ["Alpha"]
    assert [p.name for p in await points.search(RentalPointSearchType.address, "b")] == ["Beta"]
    assert len(await points.search(RentalPointSearchType.name, "   ")) == 2
    assert len(await points.search(None, None)) == 2
