from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from rental_inventory.api.deps import get_inventory_ledger
from rental_inventory.core.exceptions import EntityNotFoundError, NotFoundError
from rental_inventory.schemas.available_equipment import (
    AvailabilityResponse,
    AvailableEquipmentIn,
    AvailableEquipmentOut,
    InventoryStats,
    QuantityRequest,
)
from rental_inventory.schemas.common import PG_INT_MAX, PG_INT_MIN, CountResponse, ErrorResponse
from rental_inventory.services.inventory import InventoryLedger

router = APIRouter(prefix="/available-equipments", tags=["available-equipments"])

RecordId = Annotated[int, Path(ge=PG_INT_MIN, le=PG_INT_MAX)]

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=list[AvailableEquipmentOut],
    summary="List inventory records",
    description=(
        "Without filters every record is returned. Filters are exclusive and applied in "
        "the order rental_point_id, equipment_type_id, available_above."
    ),
)
async def list_available_equipments(
    rental_point_id: int | None = Query(
        None, ge=PG_INT_MIN, le=PG_INT_MAX, description="Only records of this rental point"
    ),
    equipment_type_id: int | None = Query(
        None, ge=PG_INT_MIN, le=PG_INT_MAX, description="Only records of this type"
    ),
    available_above: int | None = Query(
        None,
        ge=PG_INT_MIN,
        le=PG_INT_MAX,
        description="Only records with available_count strictly above this value",
    ),
    svc: InventoryLedger = Depends(get_inventory_ledger),
):
    if rental_point_id is not None:
        return await svc.find_by_rental_point(rental_point_id)
    if equipment_type_id is not None:
        return await svc.find_by_equipment_type(equipment_type_id)
    if available_above is not None:
        return await svc.find_with_available_above(available_above)
    return await svc.list_all()


@router.get("/count", response_model=CountResponse, summary="Number of inventory records")
async def count_available_equipments(svc: InventoryLedger = Depends(get_inventory_ledger)):
    return CountResponse(count=await svc.count())


@router.get(
    "/stats",
    response_model=InventoryStats,
    summary="Inventory counters",
    description="Total records and records with at least one unit available.",
)
async def inventory_stats(svc: InventoryLedger = Depends(get_inventory_ledger)):
    return InventoryStats(total=await svc.count(), with_stock=await svc.count_with_stock())


@router.get(
    "/lookup",
    response_model=AvailableEquipmentOut,
    responses=_NOT_FOUND,
    summary="Find the record for a rental point and equipment type",
)
async def lookup_available_equipment(
    rental_point_id: int = Query(..., ge=PG_INT_MIN, le=PG_INT_MAX),
    equipment_type_id: int = Query(..., ge=PG_INT_MIN, le=PG_INT_MAX),
    svc: InventoryLedger = Depends(get_inventory_ledger),
):
    record = await svc.find_by_point_and_type(rental_point_id, equipment_type_id)
    if record is None:
        raise NotFoundError(
            f"no inventory record for rental point {rental_point_id} "
            f"and equipment type {equipment_type_id}"
        )
    return record


@router.get(
    "/{record_id}",
    response_model=AvailableEquipmentOut,
    responses=_NOT_FOUND,
    summary="Get an inventory record",
)
async def get_available_equipment(
    record_id: RecordId, svc: InventoryLedger = Depends(get_inventory_ledger)
):
    record = await svc.get_by_id(record_id)
    if record is None:
        raise EntityNotFoundError("inventory record", record_id)
    return record


@router.get(
    "/{record_id}/availability",
    response_model=AvailabilityResponse,
    summary="Whether at least one unit can be rented",
    description="Missing records are reported as unavailable, not as 404.",
)
async def get_availability(
    record_id: RecordId, svc: InventoryLedger = Depends(get_inventory_ledger)
):
    return AvailabilityResponse(id=record_id, available=await svc.is_available(record_id))


@router.post(
    "",
    response_model=AvailableEquipmentOut,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create an inventory record",
)
async def create_available_equipment(
    payload: AvailableEquipmentIn, svc: InventoryLedger = Depends(get_inventory_ledger)
):
    return await svc.create(payload)


@router.put(
    "/{record_id}",
    response_model=AvailableEquipmentOut,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Replace an inventory record",
)
async def update_available_equipment(
    record_id: RecordId,
    payload: AvailableEquipmentIn,
    svc: InventoryLedger = Depends(get_inventory_ledger),
):
    return await svc.update(record_id, payload)


@router.delete(
    "/{record_id}",
    status_code=204,
    responses=_NOT_FOUND,
    summary="Delete an inventory record",
)
async def delete_available_equipment(
    record_id: RecordId, svc: InventoryLedger = Depends(get_inventory_ledger)
):
    await svc.delete(record_id)
    return Response(status_code=204)


@router.post(
    "/{record_id}/rent",
    response_model=AvailableEquipmentOut,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Rent units out",
)
async def rent_equipment(
    record_id: RecordId,
    payload: QuantityRequest,
    svc: InventoryLedger = Depends(get_inventory_ledger),
):
    return await svc.rent(record_id, payload.quantity)


@router.post(
    "/{record_id}/return",
    response_model=AvailableEquipmentOut,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Take rented units back",
)
async def return_equipment(
    record_id: RecordId,
    payload: QuantityRequest,
    svc: InventoryLedger = Depends(get_inventory_ledger),
):
    return await svc.return_(record_id, payload.quantity)
