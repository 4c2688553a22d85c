from typing import List
from fastapi import APIRouter, Depends, status

from apparel_inventory.core.dependencies import RowId, get_order_service
from apparel_inventory.services.order import OrderService
from apparel_inventory.models.base import DeleteAck
from apparel_inventory.models.order import (
    OrderCreate,
    OrderRead,
    OrderUpdate,
    OrderStatusUpdate
)

router = APIRouter()


@router.get(
    "",
    response_model=List[OrderRead],
    summary="List Orders",
    description="All orders in the fulfillment queue, ordered by id."
)
def list_orders(service: OrderService = Depends(get_order_service)):
    return service.list_orders()


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    summary="Get Order"
)
def get_order(
    order_id: RowId,
    service: OrderService = Depends(get_order_service)
):
    return service.get_order(order_id)


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Order"
)
def create_order(
    payload: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    return service.create_order(payload)


@router.patch(
    "/{order_id}/status",
    response_model=OrderRead,
    summary="Update Order Status"
)
def update_order_status(
    order_id: RowId,
    payload: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service)
):
    return service.update_status(order_id, payload.status)


@router.patch(
    "/{order_id}",
    response_model=OrderRead,
    summary="Update Order"
)
def update_order(
    order_id: RowId,
    payload: OrderUpdate,
    service: OrderService = Depends(get_order_service)
):
    return service.update_order(order_id, payload)


@router.delete(
    "/{order_id}",
    response_model=DeleteAck,
    summary="Delete Order",
    description="Hard delete. Deleting an id that does not exist still succeeds."
)
def delete_order(
    order_id: RowId,
    service: OrderService = Depends(get_order_service)
):
    return service.delete_order(order_id)
