from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rental_inventory.core.exceptions import (
    ExceedsTotalError,
    InsufficientStockError,
    InvalidQuantityError,
    InvariantViolationError,
)
from rental_inventory.models.base import Base
from rental_inventory.models.equipment_type import EquipmentType
from rental_inventory.models.rental_point import RentalPoint

COST_UNIT = "RUB/hour"
RENTAL_POINT_FK = "fk_available_equipment_rental_point"
EQUIPMENT_TYPE_FK = "fk_available_equipment_equipment_type"


class AvailableEquipment(Base):
    """Stock of one equipment type at one rental point.

    Units are either available or rented out; ``rent`` and ``return_`` move
    them between the two states and are the only stock transitions.
    """

    __tablename__ = "available_equipment"
    __table_args__ = (
        UniqueConstraint(
            "rental_point_id", "equipment_type_id", name="uq_available_equipment_point_type"
        ),
        CheckConstraint("total_count >= 0", name="ck_available_equipment_total_nonneg"),
        CheckConstraint("available_count >= 0", name="ck_available_equipment_available_nonneg"),
        CheckConstraint(
            "available_count <= total_count", name="ck_available_equipment_available_le_total"
        ),
        CheckConstraint("cost >= 1", name="ck_available_equipment_cost_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    rental_point_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("rental_points.id", ondelete="RESTRICT", name=RENTAL_POINT_FK),
        nullable=False,
        index=True,
    )
    equipment_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("equipment_types.id", ondelete="RESTRICT", name=EQUIPMENT_TYPE_FK),
        nullable=False,
        index=True,
    )
    total_count: Mapped[int] = mapped_column(Integer, nullable=False)
    available_count: Mapped[int] = mapped_column(Integer, nullable=False)
    cost: Mapped[int] = mapped_column(Integer, nullable=False)

    # Non-owning references: read through, never cascaded.
    rental_point: Mapped[RentalPoint] = relationship(lazy="joined", innerjoin=True)
    equipment_type: Mapped[EquipmentType] = relationship(lazy="joined", innerjoin=True)

    @staticmethod
    def resolve_available_count(total_count: int, available_count: int | None) -> int:
        """Fill a missing available count from the total, then check the invariant."""
        if available_count is None:
            available_count = total_count
        if available_count > total_count:
            raise InvariantViolationError(available=available_count, total=total_count)
        return available_count

    @property
    def cost_unit(self) -> str:
        return COST_UNIT

    @property
    def is_available(self) -> bool:
        return self.available_count is not None and self.available_count > 0

    def rent(self, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        if quantity > self.available_count:
            raise InsufficientStockError(available=self.available_count, requested=quantity)
        self.available_count -= quantity

    def return_(self, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        resulting = self.available_count + quantity
        if resulting > self.total_count:
            raise ExceedsTotalError(total=self.total_count, resulting=resulting)
        self.available_count = resulting

    def __repr__(self) -> str:
        return (
            f"AvailableEquipment(id={self.id!r}, rental_point_id={self.rental_point_id!r}, "
            f"equipment_type_id={self.equipment_type_id!r}, total_count={self.total_count!r}, "
            f"available_count={self.available_count!r}, cost={self.cost!r})"
        )
