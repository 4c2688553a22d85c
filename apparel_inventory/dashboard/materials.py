from typing import List, Optional
import httpx
from loguru import logger

from apparel_inventory.client.api import ApiError, InventoryClient
from apparel_inventory.dashboard.sorting import SortCycle
from apparel_inventory.models.material import MaterialRead

LOAD_ERROR = "Failed to load materials. Please try again."


class MaterialsBoard:
    """
    State behind the inventory list: loaded rows, search term, tag filter,
    sort toggle and the per-row quantity stepper.
    """

    def __init__(self, client: InventoryClient):
        self.client = client
        self.materials: List[MaterialRead] = []
        self.loading = False
        self.error: Optional[str] = None
        self.search_term = ""
        self.selected_tags: List[str] = []
        self.sort = SortCycle(["name", "quantity"])

    def load(self):
        self.loading = True
        try:
            self.materials = self.client.fetch_materials()
            self.error = None
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Error loading materials: {e}")
            self.error = LOAD_ERROR
        finally:
            self.loading = False

    def toggle_tag(self, tag: str):
        if tag in self.selected_tags:
            self.selected_tags = [t for t in self.selected_tags if t != tag]
        else:
            self.selected_tags = [*self.selected_tags, tag]

    def clear_tags(self):
        self.selected_tags = []

    def tag_filter_label(self) -> str:
        if not self.selected_tags:
            return "All Categories"
        if len(self.selected_tags) == 1:
            return self.selected_tags[0]
        return f"{len(self.selected_tags)} Categories"

    def _matches(self, material: MaterialRead) -> bool:
        if self.search_term.lower() not in material.name.lower():
            return False
        # Any selected tag is enough
        return not self.selected_tags or any(
            tag in material.tags for tag in self.selected_tags)

    def visible(self) -> List[MaterialRead]:
        rows = [m for m in self.materials if self._matches(m)]

        if self.sort.current == "name":
            rows.sort(key=lambda m: m.name.casefold())
        elif self.sort.current == "quantity":
            rows.sort(key=lambda m: m.quantity, reverse=True)
        return rows

    def low_stock(self) -> List[MaterialRead]:
        return [m for m in self.materials if m.is_low_stock]

    def apply(self, updated: MaterialRead):
        """Replace the local row with the one the server returned."""
        self.materials = [
            updated if m.id == updated.id else m for m in self.materials
        ]

    def set_quantity(self, material_id: int, quantity: int) -> MaterialRead:
        updated = self.client.update_material_quantity(material_id, quantity)
        self.apply(updated)
        return updated

    def step(self, material_id: int, delta: int) -> Optional[MaterialRead]:
        """
        Stepper buttons: clamps at zero and skips the call when nothing
        would change. Returns the stored row, or None when skipped.
        """
        material = next((m for m in self.materials if m.id == material_id), None)
        if material is None:
            raise KeyError(f"Material {material_id} is not loaded")
        target = max(0, material.quantity + delta)
        if target == material.quantity:
            return None
        return self.set_quantity(material_id, target)

    def known_tags(self) -> List[str]:
        return self.client.fetch_material_tags()
