from typing import List
from fastapi import APIRouter, Depends, status

from apparel_inventory.core.dependencies import RowId, get_product_service
from apparel_inventory.services.product import ProductService
from apparel_inventory.models.base import DeleteAck
from apparel_inventory.models.product import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
    ProductStockUpdate,
    ProductQuantityUpdate
)

router = APIRouter()


@router.get(
    "",
    response_model=List[ProductRead],
    summary="List Products"
)
def list_products(service: ProductService = Depends(get_product_service)):
    return service.list_products()


@router.get(
    "/categories",
    response_model=List[str],
    summary="List Product Categories"
)
@router.get(
    "/tags",
    response_model=List[str],
    summary="List Product Categories (legacy path)",
    include_in_schema=False
)
def list_product_categories(service: ProductService = Depends(get_product_service)):
    """
    Distinct categories across all products, sorted case-sensitively.
    """
    return service.list_categories()


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get Product"
)
def get_product(
    product_id: RowId,
    service: ProductService = Depends(get_product_service)
):
    return service.get_product(product_id)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product"
)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    return service.create_product(payload)


@router.patch(
    "/{product_id}/stock",
    response_model=ProductRead,
    summary="Update Product Stock"
)
def update_product_stock(
    product_id: RowId,
    payload: ProductStockUpdate,
    service: ProductService = Depends(get_product_service)
):
    return service.update_stock(product_id, payload.stock)


@router.patch(
    "/{product_id}/quantity",
    response_model=ProductRead,
    summary="Update Product Stock (legacy body)",
    include_in_schema=False
)
def update_product_quantity(
    product_id: RowId,
    payload: ProductQuantityUpdate,
    service: ProductService = Depends(get_product_service)
):
    return service.update_stock(product_id, payload.quantity)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update Product"
)
def update_product(
    product_id: RowId,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Merges the provided fields into the row and re-stamps updatedAt.
    """
    return service.update_product(product_id, payload)


@router.delete(
    "/{product_id}",
    response_model=DeleteAck,
    summary="Delete Product"
)
def delete_product(
    product_id: RowId,
    service: ProductService = Depends(get_product_service)
):
    return service.delete_product(product_id)
