from typing import Any, Dict, List, Optional
import httpx
from loguru import logger

from apparel_inventory.db.schema import OrderStatus
from apparel_inventory.models.base import DeleteAck
from apparel_inventory.models.material import MaterialCreate, MaterialRead
from apparel_inventory.models.order import OrderCreate, OrderRead, OrderUpdate
from apparel_inventory.models.product import ProductCreate, ProductRead, ProductUpdate


class ApiError(Exception):
    """Raised for any non-2xx response from the inventory API."""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP error! status: {status_code} ({detail})")


class InventoryClient:
    """
    Typed wrappers over the inventory API, one method per route.

    Any httpx.Client works as transport, including FastAPI's TestClient.
    Mutations return the row the server stored, never a locally built copy.
    """

    def __init__(self, http: httpx.Client, prefix: str = ""):
        self.http = http
        self.prefix = prefix.rstrip("/")

    @classmethod
    def connect(cls, base_url: str, timeout: Optional[float] = None) -> "InventoryClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, action: str, json: Optional[Dict] = None) -> Any:
        try:
            response = self.http.request(method, f"{self.prefix}{path}", json=json)
        except httpx.HTTPError as e:
            logger.error(f"Error {action}: {e}")
            raise

        if response.is_error:
            try:
                body = response.json()
                detail = body.get("detail", body) if isinstance(body, dict) else body
            except ValueError:
                detail = response.text
            logger.error(f"Error {action}: status {response.status_code} {detail}")
            raise ApiError(response.status_code, detail)

        return response.json()

    # Materials

    def fetch_materials(self) -> List[MaterialRead]:
        data = self._request("GET", "/materials", "fetching materials")
        return [MaterialRead.model_validate(item) for item in data]

    def fetch_material(self, material_id: int) -> MaterialRead:
        data = self._request("GET", f"/materials/{material_id}", "fetching material")
        return MaterialRead.model_validate(data)

    def create_material(self, material: MaterialCreate) -> MaterialRead:
        data = self._request(
            "POST", "/materials", "creating material",
            json=material.model_dump(mode="json", by_alias=True))
        return MaterialRead.model_validate(data)

    def update_material_quantity(self, material_id: int, quantity: int) -> MaterialRead:
        data = self._request(
            "PATCH", f"/materials/{material_id}/quantity",
            "updating material quantity", json={"quantity": quantity})
        return MaterialRead.model_validate(data)

    def fetch_material_tags(self) -> List[str]:
        return self._request("GET", "/materials/tags", "fetching tags")

    # Products

    def fetch_products(self) -> List[ProductRead]:
        data = self._request("GET", "/products", "fetching products")
        return [ProductRead.model_validate(item) for item in data]

    def fetch_product(self, product_id: int) -> ProductRead:
        data = self._request("GET", f"/products/{product_id}", "fetching product")
        return ProductRead.model_validate(data)

    def create_product(self, product: ProductCreate) -> ProductRead:
        data = self._request(
            "POST", "/products", "creating product",
            json=product.model_dump(mode="json", by_alias=True))
        return ProductRead.model_validate(data)

    def update_product_stock(self, product_id: int, stock: int) -> ProductRead:
        data = self._request(
            "PATCH", f"/products/{product_id}/stock",
            "updating product stock", json={"stock": stock})
        return ProductRead.model_validate(data)

    def update_product(self, product_id: int, patch: ProductUpdate) -> ProductRead:
        data = self._request(
            "PATCH", f"/products/{product_id}", "updating product",
            json=patch.model_dump(mode="json", by_alias=True, exclude_unset=True))
        return ProductRead.model_validate(data)

    def delete_product(self, product_id: int) -> DeleteAck:
        data = self._request("DELETE", f"/products/{product_id}", "deleting product")
        return DeleteAck.model_validate(data)

    def fetch_product_categories(self) -> List[str]:
        return self._request("GET", "/products/categories", "fetching categories")

    # Orders

    def fetch_orders(self) -> List[OrderRead]:
        data = self._request("GET", "/orders", "fetching orders")
        return [OrderRead.model_validate(item) for item in data]

    def fetch_order(self, order_id: int) -> OrderRead:
        data = self._request("GET", f"/orders/{order_id}", "fetching order")
        return OrderRead.model_validate(data)

    def create_order(self, order: OrderCreate) -> OrderRead:
        data = self._request(
            "POST", "/orders", "creating order",
            json=order.model_dump(mode="json", by_alias=True))
        return OrderRead.model_validate(data)

    def update_order_status(self, order_id: int, status: OrderStatus) -> OrderRead:
        data = self._request(
            "PATCH", f"/orders/{order_id}/status", "updating order status",
            json={"status": OrderStatus(status).value})
        return OrderRead.model_validate(data)

    def update_order(self, order_id: int, patch: OrderUpdate) -> OrderRead:
        data = self._request(
            "PATCH", f"/orders/{order_id}", "updating order",
            json=patch.model_dump(mode="json", by_alias=True, exclude_unset=True))
        return OrderRead.model_validate(data)

    def delete_order(self, order_id: int) -> DeleteAck:
        data = self._request("DELETE", f"/orders/{order_id}", "deleting order")
        return DeleteAck.model_validate(data)
