from __future__ import annotations

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from rental_inventory.models.base import Base


class RentalPoint(Base):
    __tablename__ = "rental_points"
    __table_args__ = (UniqueConstraint("address", name="uq_rental_points_address"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # exact, case-sensitive uniqueness
    address: Mapped[str] = mapped_column(String(300), nullable=False)
    opening_hours: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"RentalPoint(id={self.id!r}, name={self.name!r}, address={self.address!r})"
