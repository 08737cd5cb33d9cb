# scripts/seed.py
"""
Seed a small demo inventory: two rental points, three equipment types and the
stock linking them. Re-running is safe: records that already exist (same
address, same type name, same point/type pair) are left untouched.
"""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

# Run from the repository root
sys.path.append(os.path.abspath("."))

from rental_inventory import db
from rental_inventory.core.exceptions import ConflictError
from rental_inventory.infra.unit_of_work import SqlAlchemyUnitOfWork
from rental_inventory.schemas import AvailableEquipmentIn, EquipmentTypeIn, RentalPointIn
from rental_inventory.services import EquipmentCatalog, InventoryLedger, RentalPointCatalog

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

RENTAL_POINT_SEED = [
    RentalPointIn(name="Absolut Sport", address="123 Main St", opening_hours="9-21"),
    RentalPointIn(name="Lakeside Rentals", address="7 Harbour Rd", opening_hours="Mon-Sun 8-20"),
]

EQUIPMENT_TYPE_SEED = [
    EquipmentTypeIn(type_name="Mountain Bike", category="Bikes"),
    EquipmentTypeIn(type_name="Kayak", category="Water", description="Single-seat, with paddle"),
    EquipmentTypeIn(type_name="Tent", category="Camping", description="Three-person dome tent"),
]

# (point address, type name, total, cost per hour)
STOCK_SEED = [
    ("123 Main St", "Mountain Bike", 10, 100),
    ("123 Main St", "Tent", 4, 60),
    ("7 Harbour Rd", "Kayak", 6, 250),
    ("7 Harbour Rd", "Mountain Bike", 3, 120),
]


def _uow_factory() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(db.SessionLocal)


async def seed(rent_demo: bool) -> int:
    points = RentalPointCatalog(_uow_factory)
    types = EquipmentCatalog(_uow_factory)
    ledger = InventoryLedger(_uow_factory)

    for payload in RENTAL_POINT_SEED:
        try:
            await points.create(payload)
        except ConflictError:
            logger.info("rental point %r already present", payload.address)
    for payload in EQUIPMENT_TYPE_SEED:
        try:
            await types.create(payload)
        except ConflictError:
            logger.info("equipment type %r already present", payload.type_name)

    point_ids = {p.address: p.id for p in await points.list_all()}
    type_ids = {t.type_name.lower(): t.id for t in await types.list_all()}

    created = 0
    for address, type_name, total, cost in STOCK_SEED:
        payload = AvailableEquipmentIn(
            rental_point_id=point_ids[address],
            equipment_type_id=type_ids[type_name.lower()],
            total_count=total,
            cost=cost,
        )
        try:
            record = await ledger.create(payload)
        except ConflictError:
            logger.info("stock for %r at %r already present", type_name, address)
            continue
        created += 1
        if rent_demo:
            await ledger.rent(record.id, 3)
            await ledger.return_(record.id, 1)

    logger.info("seed: %d stock records created", created)
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed demo rental points and inventory.")
    parser.add_argument(
        "--rent-demo",
        action="store_true",
        help="Rent 3 and return 1 unit of every newly created stock record.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    if os.getenv("APP_ENV", "").lower() == "prod":
        logger.error("Seeding is disabled when APP_ENV=prod.")
        return 1
    return asyncio.run(seed(args.rent_demo))


if __name__ == "__main__":
    raise SystemExit(main())
