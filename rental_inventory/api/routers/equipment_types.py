from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from rental_inventory.api.deps import get_equipment_catalog
from rental_inventory.core.exceptions import EntityNotFoundError
from rental_inventory.schemas.common import PG_INT_MAX, PG_INT_MIN, CountResponse, ErrorResponse
from rental_inventory.schemas.equipment_type import (
    EquipmentTypeIn,
    EquipmentTypeOut,
    EquipmentTypeSearchType,
)
from rental_inventory.services.equipment_types import EquipmentCatalog

router = APIRouter(prefix="/equipment-types", tags=["equipment-types"])

TypeId = Annotated[int, Path(ge=PG_INT_MIN, le=PG_INT_MAX)]


@router.get("", response_model=list[EquipmentTypeOut], summary="List equipment types")
async def list_equipment_types(svc: EquipmentCatalog = Depends(get_equipment_catalog)):
    return await svc.list_all()


@router.get("/count", response_model=CountResponse, summary="Number of equipment types")
async def count_equipment_types(svc: EquipmentCatalog = Depends(get_equipment_catalog)):
    return CountResponse(count=await svc.count())


@router.get(
    "/search",
    response_model=list[EquipmentTypeOut],
    summary="Search equipment types",
    description="Case-insensitive substring search by type name or category.",
)
async def search_equipment_types(
    search_type: EquipmentTypeSearchType | None = Query(None, description="Field to search"),
    q: str | None = Query(None, max_length=100, description="Substring to look for"),
    svc: EquipmentCatalog = Depends(get_equipment_catalog),
):
    return await svc.search(search_type, q)


@router.get(
    "/{type_id}",
    response_model=EquipmentTypeOut,
    responses={404: {"model": ErrorResponse}},
    summary="Get an equipment type",
)
async def get_equipment_type(
    type_id: TypeId, svc: EquipmentCatalog = Depends(get_equipment_catalog)
):
    equipment_type = await svc.get_by_id(type_id)
    if equipment_type is None:
        raise EntityNotFoundError("equipment type", type_id)
    return equipment_type


@router.post(
    "",
    response_model=EquipmentTypeOut,
    status_code=201,
    responses={409: {"model": ErrorResponse}},
    summary="Create an equipment type",
)
async def create_equipment_type(
    payload: EquipmentTypeIn, svc: EquipmentCatalog = Depends(get_equipment_catalog)
):
    return await svc.create(payload)


@router.put(
    "/{type_id}",
    response_model=EquipmentTypeOut,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Replace an equipment type",
)
async def update_equipment_type(
    type_id: TypeId,
    payload: EquipmentTypeIn,
    svc: EquipmentCatalog = Depends(get_equipment_catalog),
):
    return await svc.update(type_id, payload)


@router.delete(
    "/{type_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Delete an equipment type",
)
async def delete_equipment_type(
    type_id: TypeId, svc: EquipmentCatalog = Depends(get_equipment_catalog)
):
    await svc.delete(type_id)
    return Response(status_code=204)
