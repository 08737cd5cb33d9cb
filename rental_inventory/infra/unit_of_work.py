"""Unit of Work abstraction used by the service layer."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rental_inventory.core.exceptions import InfrastructureError
from rental_inventory.repositories.interfaces import (
    AvailableEquipmentRepository,
    EquipmentTypeRepository,
    RentalPointRepository,
)
from rental_inventory.repositories.sqlalchemy import (
    SqlAlchemyAvailableEquipmentRepository,
    SqlAlchemyEquipmentTypeRepository,
    SqlAlchemyRentalPointRepository,
)


class UnitOfWork(Protocol, AbstractAsyncContextManager["UnitOfWork"]):
    """Defines the repository boundary exposed to services.

    One unit of work is one transaction: it commits when the ``async with``
    block exits cleanly and rolls back otherwise.
    """

    rental_points: RentalPointRepository
    equipment_types: EquipmentTypeRepository
    inventory: AvailableEquipmentRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self.rental_points: RentalPointRepository
        self.equipment_types: EquipmentTypeRepository
        self.inventory: AvailableEquipmentRepository

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        session = self._session_factory()
        self._session = session
        self.rental_points = SqlAlchemyRentalPointRepository(session)
        self.equipment_types = SqlAlchemyEquipmentTypeRepository(session)
        self.inventory = SqlAlchemyAvailableEquipmentRepository(session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is None:
            return
        try:
            if exc_type:
                await self._session.rollback()
            else:
                await self._session.commit()
        except SQLAlchemyError as commit_exc:
            raise InfrastructureError("database unavailable") from commit_exc
        finally:
            await self._session.close()
            self._session = None
        if exc is not None and isinstance(exc, SQLAlchemyError):
            # Unify raw DB errors; domain conflicts were translated by the repositories
            raise InfrastructureError("database unavailable") from exc

    async def commit(self) -> None:
        if self._session is not None:
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork session is not initialized. Use within context manager.")
        return self._session
