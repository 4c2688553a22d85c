from typing import List, Optional

from pydantic import Field

from apparel_inventory.models.base import CamelModel, UtcDatetime


class MaterialBase(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    color: str
    size: str
    quantity: int
    pack_size: int = Field(
        ge=1, description="Restock pack size and low stock threshold")
    tags: List[str] = []
    image_url: Optional[str] = None


class MaterialCreate(MaterialBase):
    """minQuantity is not part of the payload; it is always stored as null."""
    pass


class MaterialQuantityUpdate(CamelModel):
    quantity: int


class MaterialRead(MaterialBase):
    id: int
    min_quantity: Optional[int] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < self.pack_size
