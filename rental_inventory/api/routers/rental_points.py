from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from rental_inventory.api.deps import get_rental_point_catalog
from rental_inventory.core.exceptions import EntityNotFoundError
from rental_inventory.schemas.common import PG_INT_MAX, PG_INT_MIN, CountResponse, ErrorResponse
from rental_inventory.schemas.rental_point import (
    RentalPointIn,
    RentalPointOut,
    RentalPointSearchType,
)
from rental_inventory.services.rental_points import RentalPointCatalog

router = APIRouter(prefix="/rental-points", tags=["rental-points"])

PointId = Annotated[int, Path(ge=PG_INT_MIN, le=PG_INT_MAX)]


@router.get("", response_model=list[RentalPointOut], summary="List rental points")
async def list_rental_points(svc: RentalPointCatalog = Depends(get_rental_point_catalog)):
    return await svc.list_all()


@router.get("/count", response_model=CountResponse, summary="Number of rental points")
async def count_rental_points(svc: RentalPointCatalog = Depends(get_rental_point_catalog)):
    return CountResponse(count=await svc.count())


@router.get(
    "/search",
    response_model=list[RentalPointOut],
    summary="Search rental points",
    description=(
        "Substring search by name or address (case-insensitive) or by opening hours "
        "(case-sensitive). A blank query lists every rental point."
    ),
)
async def search_rental_points(
    search_type: RentalPointSearchType | None = Query(None, description="Field to search"),
    q: str | None = Query(None, max_length=500, description="Substring to look for"),
    svc: RentalPointCatalog = Depends(get_rental_point_catalog),
):
    return await svc.search(search_type, q)


@router.get(
    "/{point_id}",
    response_model=RentalPointOut,
    responses={404: {"model": ErrorResponse}},
    summary="Get a rental point",
)
async def get_rental_point(
    point_id: PointId, svc: RentalPointCatalog = Depends(get_rental_point_catalog)
):
    point = await svc.get_by_id(point_id)
    if point is None:
        raise EntityNotFoundError("rental point", point_id)
    return point


@router.post(
    "",
    response_model=RentalPointOut,
    status_code=201,
    responses={409: {"model": ErrorResponse}},
    summary="Create a rental point",
)
async def create_rental_point(
    payload: RentalPointIn, svc: RentalPointCatalog = Depends(get_rental_point_catalog)
):
    return await svc.create(payload)


@router.put(
    "/{point_id}",
    response_model=RentalPointOut,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Replace a rental point",
)
async def update_rental_point(
    point_id: PointId,
    payload: RentalPointIn,
    svc: RentalPointCatalog = Depends(get_rental_point_catalog),
):
    return await svc.update(point_id, payload)


@router.delete(
    "/{point_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Delete a rental point",
)
async def delete_rental_point(
    point_id: PointId, svc: RentalPointCatalog = Depends(get_rental_point_catalog)
):
    await svc.delete(point_id)
    return Response(status_code=204)
