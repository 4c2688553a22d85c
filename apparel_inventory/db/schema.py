from typing import Optional, List
from datetime import datetime, timezone
from enum import Enum
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, JSON


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    RECEIVED = "RECEIVED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class TimestampMixin(SQLModel):
    """
    Audit timestamps shared by every collection.
    The catalog services stamp both fields explicitly on each write, so a
    freshly created row always has created_at == updated_at and every later
    mutation moves updated_at forward.
    """
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        description="UTC timestamp of the insert. Example: '2025-01-01T09:00:00Z'"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        description="UTC timestamp of the last mutation. Example: '2025-01-02T17:45:10Z'"
    )


class Material(TimestampMixin, SQLModel, table=True):
    """
    A single stocked apparel item (fabric roll, blank tee, ...).
    pack_size is both the restock pack size and the low stock threshold:
    a row with quantity < pack_size is shown with a warning.
    """
    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="Store-assigned identifier."
    )
    name: str = Field(
        index=True,
        description="Display name. Example: 'Red Cotton Tee'"
    )
    color: str = Field(description="Example: 'red'")
    size: str = Field(description="Example: 'M'")
    quantity: int = Field(
        default=0,
        description="Units currently on hand. No floor is enforced by the store."
    )
    pack_size: int = Field(
        default=1,
        description="Restock pack size, doubles as the low stock threshold."
    )
    tags: List[str] = Field(
        default_factory=list,
        sa_type=JSON,
        description="Free-form categories used for filtering. Example: ['Blanks', 'Dark']"
    )
    image_url: Optional[str] = Field(default=None)
    min_quantity: Optional[int] = Field(
        default=None,
        description="Legacy threshold replaced by pack_size. Always written as NULL."
    )


class Product(TimestampMixin, SQLModel, table=True):
    """
    A catalog item with variant dimensions (sizes, colors) rather than a
    single stocked unit.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str = Field(default="")
    stock: int = Field(default=0)
    image: Optional[str] = Field(default=None)
    categories: List[str] = Field(default_factory=list, sa_type=JSON)
    sizes: List[str] = Field(default_factory=list, sa_type=JSON)
    colors: List[str] = Field(default_factory=list, sa_type=JSON)


class Order(TimestampMixin, SQLModel, table=True):
    """
    An incoming customer order waiting in the fulfillment queue.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    order_from: str = Field(
        index=True,
        description="Customer or company placing the order. Example: 'Acme'"
    )
    contact_info: str = Field(description="Example: 'buyer@acme.com'")
    description: str = Field(description="Example: 'Red Fabric'")
    quantity: int
    scheduled_delivery: datetime = Field(
        sa_type=DateTime(timezone=True),
        description="Promised delivery time, UTC."
    )
    status: OrderStatus = Field(default=OrderStatus.CREATED)
