from typing import List, Optional
from sqlmodel import Session

from apparel_inventory.db.schema import Product
from apparel_inventory.models.base import DeleteAck
from apparel_inventory.models.product import ProductCreate, ProductUpdate, ProductRead
from apparel_inventory.services.catalog import CatalogService
from apparel_inventory.services.policy import AllowedValues


class ProductService(CatalogService[Product]):
    model = Product
    label = "Product"
    nullable_fields = frozenset({"image"})

    def __init__(self, session: Session, category_policy: Optional[AllowedValues] = None):
        super().__init__(session)
        self.category_policy = category_policy or AllowedValues(field="categories")

    def list_products(self) -> List[ProductRead]:
        return [ProductRead.model_validate(p) for p in self.list_rows()]

    def get_product(self, product_id: int) -> ProductRead:
        return ProductRead.model_validate(self.get_row(product_id))

    def create_product(self, data: ProductCreate) -> ProductRead:
        values = data.model_dump()
        values["categories"] = self.category_policy.apply(data.categories)
        return ProductRead.model_validate(self.insert_row(values))

    def update_stock(self, product_id: int, stock: int) -> ProductRead:
        product = self.update_fields(product_id, {"stock": stock})
        return ProductRead.model_validate(product)

    def update_product(self, product_id: int, data: ProductUpdate) -> ProductRead:
        update_data = data.model_dump(exclude_unset=True)
        if update_data.get("categories") is not None:
            update_data["categories"] = self.category_policy.apply(
                update_data["categories"])

        product = self.update_fields(product_id, update_data)
        return ProductRead.model_validate(product)

    def delete_product(self, product_id: int) -> DeleteAck:
        return self.delete_row(product_id)

    def list_categories(self) -> List[str]:
        return self.distinct_values(Product.categories)
