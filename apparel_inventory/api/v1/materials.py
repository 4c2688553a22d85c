from typing import List
from fastapi import APIRouter, Depends, status

from apparel_inventory.core.dependencies import RowId, get_material_service
from apparel_inventory.services.material import MaterialService
from apparel_inventory.models.material import (
    MaterialCreate,
    MaterialQuantityUpdate,
    MaterialRead
)

router = APIRouter()


@router.get(
    "",
    response_model=List[MaterialRead],
    status_code=status.HTTP_200_OK,
    summary="List Materials",
    description="Retrieve every material row, ordered by id."
)
def list_materials(service: MaterialService = Depends(get_material_service)):
    return service.list_materials()


@router.get(
    "/tags",
    response_model=List[str],
    summary="List Material Tags",
    description="Distinct tags across all materials, sorted case-sensitively."
)
def list_material_tags(service: MaterialService = Depends(get_material_service)):
    return service.list_tags()


@router.get(
    "/{material_id}",
    response_model=MaterialRead,
    summary="Get Material"
)
def get_material(
    material_id: RowId,
    service: MaterialService = Depends(get_material_service)
):
    return service.get_material(material_id)


@router.post(
    "",
    response_model=MaterialRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Material",
    description="Add a stocked item. The legacy minQuantity column is always stored as null."
)
def create_material(
    data: MaterialCreate,
    service: MaterialService = Depends(get_material_service)
):
    return service.create_material(data)


@router.patch(
    "/{material_id}/quantity",
    response_model=MaterialRead,
    summary="Update Material Quantity"
)
def update_material_quantity(
    material_id: RowId,
    data: MaterialQuantityUpdate,
    service: MaterialService = Depends(get_material_service)
):
    return service.update_quantity(material_id, data.quantity)
