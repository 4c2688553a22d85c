from typing import List

from apparel_inventory.db.schema import Order, OrderStatus
from apparel_inventory.models.base import DeleteAck
from apparel_inventory.models.order import OrderCreate, OrderUpdate, OrderRead
from apparel_inventory.services.catalog import CatalogService


class OrderService(CatalogService[Order]):
    model = Order
    label = "Order"

    def list_orders(self) -> List[OrderRead]:
        return [OrderRead.model_validate(o) for o in self.list_rows()]

    def get_order(self, order_id: int) -> OrderRead:
        return OrderRead.model_validate(self.get_row(order_id))

    def create_order(self, data: OrderCreate) -> OrderRead:
        return OrderRead.model_validate(self.insert_row(data.model_dump()))

    def update_status(self, order_id: int, status: OrderStatus) -> OrderRead:
        order = self.update_fields(order_id, {"status": status})
        return OrderRead.model_validate(order)

    def update_order(self, order_id: int, data: OrderUpdate) -> OrderRead:
        order = self.update_fields(order_id, data.model_dump(exclude_unset=True))
        return OrderRead.model_validate(order)

    def delete_order(self, order_id: int) -> DeleteAck:
        return self.delete_row(order_id)
