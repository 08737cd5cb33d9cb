"""Repository abstractions for the service layer."""

from __future__ import annotations

from typing import Protocol

from rental_inventory.models import AvailableEquipment, EquipmentType, RentalPoint


class RentalPointRepository(Protocol):
    """Storage boundary for rental points."""

    async def list_all(self) -> list[RentalPoint]: ...

    async def get_by_id(self, point_id: int) -> RentalPoint | None: ...

    async def exists_by_address(self, address: str) -> bool: ...

    async def add(self, point: RentalPoint) -> RentalPoint: ...

    async def save(self, point: RentalPoint) -> RentalPoint: ...

    async def delete(self, point: RentalPoint) -> None: ...

    async def search_by_name(self, q: str) -> list[RentalPoint]: ...

    async def search_by_address(self, q: str) -> list[RentalPoint]: ...

    async def search_by_opening_hours(self, q: str) -> list[RentalPoint]: ...

    async def count(self) -> int: ...


class EquipmentTypeRepository(Protocol):
    """Storage boundary for equipment types."""

    async def list_all(self) -> list[EquipmentType]: ...

    async def get_by_id(self, type_id: int) -> EquipmentType | None: ...

    async def exists_by_type_name(self, type_name: str) -> bool: ...

    async def add(self, equipment_type: EquipmentType) -> EquipmentType: ...

    async def save(self, equipment_type: EquipmentType) -> EquipmentType: ...

    async def delete(self, equipment_type: EquipmentType) -> None: ...

    async def search_by_type_name(self, q: str) -> list[EquipmentType]: ...

    async def search_by_category(self, q: str) -> list[EquipmentType]: ...

    async def count(self) -> int: ...


class AvailableEquipmentRepository(Protocol):
    """Storage boundary for inventory rows."""

    async def list_all(self) -> list[AvailableEquipment]: ...

    async def get_by_id(self, record_id: int) -> AvailableEquipment | None: ...

    async def get_for_update(self, record_id: int) -> AvailableEquipment | None:
        """Load a row and hold a write lock on it until the unit of work ends."""
        ...

    async def add(self, record: AvailableEquipment) -> AvailableEquipment: ...

    async def save(self, record: AvailableEquipment) -> AvailableEquipment: ...

    async def delete(self, record: AvailableEquipment) -> None: ...

    async def exists_by_pair(self, rental_point_id: int, equipment_type_id: int) -> bool: ...

    async def exists_for_rental_point(self, rental_point_id: int) -> bool: ...

    async def exists_for_equipment_type(self, equipment_type_id: int) -> bool: ...

    async def find_by_rental_point(self, rental_point_id: int) -> list[AvailableEquipment]: ...

    async def find_by_equipment_type(self, equipment_type_id: int) -> list[AvailableEquipment]: ...

    async def find_by_pair(
        self, rental_point_id: int, equipment_type_id: int
    ) -> AvailableEquipment | None: ...

    async def find_with_available_above(self, threshold: int) -> list[AvailableEquipment]: ...

    async def count(self) -> int: ...

    async def count_with_available_above(self, threshold: int) -> int: ...
