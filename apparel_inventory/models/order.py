from typing import Optional
from pydantic import Field

from apparel_inventory.db.schema import OrderStatus
from apparel_inventory.models.base import CamelModel, UtcDatetime


class OrderBase(CamelModel):
    order_from: str = Field(min_length=1, max_length=200)
    contact_info: str
    description: str
    quantity: int
    scheduled_delivery: UtcDatetime
    status: OrderStatus = OrderStatus.CREATED


class OrderCreate(OrderBase):
    pass


class OrderRead(OrderBase):
    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime


class OrderUpdate(CamelModel):
    order_from: Optional[str] = Field(default=None, min_length=1, max_length=200)
    contact_info: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    scheduled_delivery: Optional[UtcDatetime] = None
    status: Optional[OrderStatus] = None


class OrderStatusUpdate(CamelModel):
    status: OrderStatus
