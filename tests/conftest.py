# tests/conftest.py
import os

# Configure the environment before the app (and its settings) are imported
os.environ["APP_ENV"] = "test"
os.environ["SENTRY_DSN"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from rental_inventory.api.deps import (  # noqa: E402
    get_equipment_catalog,
    get_health_service,
    get_inventory_ledger,
    get_rental_point_catalog,
)
from rental_inventory.main import create_app  # noqa: E402
from rental_inventory.models import AvailableEquipment, EquipmentType, RentalPoint  # noqa: E402
from rental_inventory.services import (  # noqa: E402
    EquipmentCatalog,
    InventoryLedger,
    RentalPointCatalog,
)
from rental_inventory.services.health import HealthService  # noqa: E402


# ==== In-memory storage behind the repository interfaces ====
class _FakeRepository:
    def __init__(self, store: "InMemoryStore", table: str) -> None:
        self._store = store
        self._table = table

    @property
    def _rows(self) -> dict:
        return getattr(self._store, self._table)

    def _where(self, predicate) -> list:
        return [self._rows[key] for key in sorted(self._rows) if predicate(self._rows[key])]

    async def list_all(self) -> list:
        return self._where(lambda _: True)

    async def get_by_id(self, entity_id: int):
        return self._rows.get(entity_id)

    async def add(self, entity):
        entity.id = self._store.next_id(self._table)
        self._rows[entity.id] = entity
        return entity

    async def save(self, entity):
        return entity

    async def delete(self, entity) -> None:
        self._rows.pop(entity.id, None)

    async def count(self) -> int:
        return len(self._rows)


class FakeRentalPointRepository(_FakeRepository):
    def __init__(self, store: "InMemoryStore") -> None:
        super().__init__(store, "rental_points")

    async def exists_by_address(self, address: str) -> bool:
        return any(p.address == address for p in self._rows.values())

    async def search_by_name(self, q: str) -> list[RentalPoint]:
        return self._where(lambda p: q.lower() in p.name.lower())

    async def search_by_address(self, q: str) -> list[RentalPoint]:
        return self._where(lambda p: q.lower() in p.address.lower())

    async def search_by_opening_hours(self, q: str) -> list[RentalPoint]:
        return self._where(lambda p: q in p.opening_hours)


class FakeEquipmentTypeRepository(_FakeRepository):
    def __init__(self, store: "InMemoryStore") -> None:
        super().__init__(store, "equipment_types")

    async def exists_by_type_name(self, type_name: str) -> bool:
        return any(t.type_name.lower() == type_name.lower() for t in self._rows.values())

    async def search_by_type_name(self, q: str) -> list[EquipmentType]:
        return self._where(lambda t: q.lower() in t.type_name.lower())

    async def search_by_category(self, q: str) -> list[EquipmentType]:
        return self._where(lambda t: q.lower() in t.category.lower())


class FakeAvailableEquipmentRepository(_FakeRepository):
    def __init__(self, store: "InMemoryStore") -> None:
        super().__init__(store, "inventory")

    async def get_for_update(self, record_id: int) -> AvailableEquipment | None:
        return self._rows.get(record_id)

    async def exists_by_pair(self, rental_point_id: int, equipment_type_id: int) -> bool:
        return await self.find_by_pair(rental_point_id, equipment_type_id) is not None

    async def exists_for_rental_point(self, rental_point_id: int) -> bool:
        return bool(await self.find_by_rental_point(rental_point_id))

    async def exists_for_equipment_type(self, equipment_type_id: int) -> bool:
        return bool(await self.find_by_equipment_type(equipment_type_id))

    async def find_by_rental_point(self, rental_point_id: int) -> list[AvailableEquipment]:
        return self._where(lambda r: r.rental_point_id == rental_point_id)

    async def find_by_equipment_type(self, equipment_type_id: int) -> list[AvailableEquipment]:
        return self._where(lambda r: r.equipment_type_id == equipment_type_id)

    async def find_by_pair(
        self, rental_point_id: int, equipment_type_id: int
    ) -> AvailableEquipment | None:
        matches = self._where(
            lambda r: r.rental_point_id == rental_point_id
            and r.equipment_type_id == equipment_type_id
        )
        return matches[0] if matches else None

    async def find_with_available_above(self, threshold: int) -> list[AvailableEquipment]:
        return self._where(lambda r: r.available_count > threshold)

    async def count_with_available_above(self, threshold: int) -> int:
        return len(await self.find_with_available_above(threshold))


class FakeUnitOfWork:
    def __init__(self, store: "InMemoryStore") -> None:
        self._store = store
        self.rental_points = FakeRentalPointRepository(store)
        self.equipment_types = FakeEquipmentTypeRepository(store)
        self.inventory = FakeAvailableEquipmentRepository(store)

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        self._store.commits += 1

    async def rollback(self) -> None:
        self._store.rollbacks += 1


class InMemoryStore:
    """Shared tables for every unit of work handed out by ``uow_factory``."""

    def __init__(self) -> None:
        self.rental_points: dict[int, RentalPoint] = {}
        self.equipment_types: dict[int, EquipmentType] = {}
        self.inventory: dict[int, AvailableEquipment] = {}
        self.commits = 0
        self.rollbacks = 0
        self._sequences: dict[str, int] = {}

    def next_id(self, table: str) -> int:
        self._sequences[table] = self._sequences.get(table, 0) + 1
        return self._sequences[table]

    def uow_factory(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(self)


def make_session_factory(session: AsyncMock):
    """async_sessionmaker stand-in yielding ``session`` from ``async with``."""
    session.__aenter__.return_value = session
    return lambda: session


# ==== Fixtures ====
@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def points(store) -> RentalPointCatalog:
    return RentalPointCatalog(store.uow_factory)


@pytest.fixture
def equipment_types(store) -> EquipmentCatalog:
    return EquipmentCatalog(store.uow_factory)


@pytest.fixture
def ledger(store) -> InventoryLedger:
    return InventoryLedger(store.uow_factory)


@pytest.fixture
def db_session() -> AsyncMock:
    return AsyncMock()


@pytest_asyncio.fixture
async def app_client(store, db_session):
    app = create_app()
    app.dependency_overrides[get_rental_point_catalog] = lambda: RentalPointCatalog(
        store.uow_factory
    )
    app.dependency_overrides[get_equipment_catalog] = lambda: EquipmentCatalog(store.uow_factory)
    app.dependency_overrides[get_inventory_ledger] = lambda: InventoryLedger(store.uow_factory)
    app.dependency_overrides[get_health_service] = lambda: HealthService(
        make_session_factory(db_session)
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
