from __future__ import annotations

from sqlalchemy import Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from rental_inventory.models.base import Base


class EquipmentType(Base):
    __tablename__ = "equipment_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type_name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"EquipmentType(id={self.id!r}, type_name={self.type_name!r})"


# "Bike" and "bike" are the same type
Index(
    "uq_equipment_types_type_name_lower",
    func.lower(EquipmentType.type_name),
    unique=True,
)
