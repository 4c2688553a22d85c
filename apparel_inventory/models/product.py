from typing import List, Optional

from pydantic import Field

from apparel_inventory.models.base import CamelModel, UtcDatetime


class ProductBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = ""
    stock: int = 0
    image: Optional[str] = None
    categories: List[str] = []
    sizes: List[str] = []
    colors: List[str] = []


class ProductCreate(ProductBase):
    pass


class ProductRead(ProductBase):
    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    stock: Optional[int] = None
    image: Optional[str] = None
    categories: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None


class ProductStockUpdate(CamelModel):
    stock: int


class ProductQuantityUpdate(CamelModel):
    """Legacy body shape of PATCH /products/{id}/quantity."""
    quantity: int
