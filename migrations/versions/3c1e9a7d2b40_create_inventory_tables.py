"""create rental points, equipment types and available equipment

Revision ID: 3c1e9a7d2b40
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1e9a7d2b40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "rental_points",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("address", sa.String(length=300), nullable=False),
        sa.Column("opening_hours", sa.Text(), nullable=False),
        sa.UniqueConstraint("address", name="uq_rental_points_address"),
    )

    op.create_table(
        "equipment_types",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("type_name", sa.String(length=100), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    # Type names are unique ignoring case
    op.create_index(
        "uq_equipment_types_type_name_lower",
        "equipment_types",
        [sa.text("lower(type_name)")],
        unique=True,
    )

    op.create_table(
        "available_equipment",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "rental_point_id",
            sa.Integer(),
            sa.ForeignKey(
                "rental_points.id",
                ondelete="RESTRICT",
                name="fk_available_equipment_rental_point",
            ),
            nullable=False,
        ),
        sa.Column(
            "equipment_type_id",
            sa.Integer(),
            sa.ForeignKey(
                "equipment_types.id",
                ondelete="RESTRICT",
                name="fk_available_equipment_equipment_type",
            ),
            nullable=False,
        ),
        sa.Column("total_count", sa.Integer(), nullable=False),
        sa.Column("available_count", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False),
        sa.UniqueConstraint(
            "rental_point_id", "equipment_type_id", name="uq_available_equipment_point_type"
        ),
        sa.CheckConstraint("total_count >= 0", name="ck_available_equipment_total_nonneg"),
        sa.CheckConstraint(
            "available_count >= 0", name="ck_available_equipment_available_nonneg"
        ),
        sa.CheckConstraint(
            "available_count <= total_count", name="ck_available_equipment_available_le_total"
        ),
        sa.CheckConstraint("cost >= 1", name="ck_available_equipment_cost_positive"),
    )
    op.create_index(
        "ix_available_equipment_rental_point_id", "available_equipment", ["rental_point_id"]
    )
    op.create_index(
        "ix_available_equipment_equipment_type_id", "available_equipment", ["equipment_type_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_available_equipment_equipment_type_id", table_name="available_equipment")
    op.drop_index("ix_available_equipment_rental_point_id", table_name="available_equipment")
    op.drop_table("available_equipment")
    op.drop_index("uq_equipment_types_type_name_lower", table_name="equipment_types")
    op.drop_table("equipment_types")
    op.drop_table("rental_points")
