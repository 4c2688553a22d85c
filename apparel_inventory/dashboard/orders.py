from typing import List, Optional
from datetime import date, datetime, time, timezone
import httpx
from loguru import logger

from apparel_inventory.client.api import ApiError, InventoryClient
from apparel_inventory.dashboard.sorting import SortCycle
from apparel_inventory.db.schema import OrderStatus
from apparel_inventory.models.order import OrderRead

LOAD_ERROR = "Failed to load orders. Please try again."


class OrderQueue:
    """
    State behind the fulfillment order queue.
    """

    def __init__(self, client: InventoryClient):
        self.client = client
        self.orders: List[OrderRead] = []
        self.loading = False
        self.error: Optional[str] = None
        self.search_term = ""
        self.selected_statuses: List[OrderStatus] = []
        self.start_date: Optional[date] = None
        self.end_date: Optional[date] = None
        self.sort = SortCycle(["orderId", "scheduledDelivery", "name"])

    def load(self):
        self.loading = True
        try:
            # Cancelled orders never enter the queue
            self.orders = [
                o for o in self.client.fetch_orders()
                if o.status != OrderStatus.CANCELLED
            ]
            self.error = None
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Error loading orders: {e}")
            self.error = LOAD_ERROR
        finally:
            self.loading = False

    def _matches(self, order: OrderRead) -> bool:
        if self.search_term:
            needle = self.search_term.lower()
            haystacks = (order.description or "", order.order_from, order.contact_info)
            if not any(needle in text.lower() for text in haystacks):
                return False

        if self.selected_statuses and order.status not in self.selected_statuses:
            return False

        # Whole UTC days: from the start of start_date to the end of end_date
        if self.start_date:
            start = datetime.combine(self.start_date, time.min, tzinfo=timezone.utc)
            if order.scheduled_delivery < start:
                return False
        if self.end_date:
            end = datetime.combine(self.end_date, time.max, tzinfo=timezone.utc)
            if order.scheduled_delivery > end:
                return False

        return True

    def visible(self) -> List[OrderRead]:
        rows = [o for o in self.orders if self._matches(o)]

        if self.sort.current == "orderId":
            rows.sort(key=lambda o: o.id)
        elif self.sort.current == "scheduledDelivery":
            rows.sort(key=lambda o: o.scheduled_delivery)
        elif self.sort.current == "name":
            rows.sort(key=lambda o: o.order_from.casefold())
        return rows

    def apply(self, updated: OrderRead):
        self.orders = [updated if o.id == updated.id else o for o in self.orders]

    def update_status(self, order_id: int, status: OrderStatus) -> OrderRead:
        updated = self.client.update_order_status(order_id, status)
        self.apply(updated)
        return updated

    def add(self, created: OrderRead):
        self.orders = [*self.orders, created]

    def cancel(self, order_id: int):
        """
        Deletes the order and drops it locally. On failure the whole list is
        reloaded from the server instead.
        """
        try:
            self.client.delete_order(order_id)
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Error removing order {order_id}: {e}")
            self.load()
            return
        self.orders = [o for o in self.orders if o.id != order_id]
