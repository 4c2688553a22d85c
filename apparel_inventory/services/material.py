from typing import List, Optional
from sqlmodel import Session

from apparel_inventory.db.schema import Material
from apparel_inventory.models.material import MaterialCreate, MaterialRead
from apparel_inventory.services.catalog import CatalogService
from apparel_inventory.services.policy import AllowedValues


class MaterialService(CatalogService[Material]):
    model = Material
    label = "Material"

    def __init__(self, session: Session, tag_policy: Optional[AllowedValues] = None):
        super().__init__(session)
        self.tag_policy = tag_policy or AllowedValues(field="tags")

    def list_materials(self) -> List[MaterialRead]:
        return [MaterialRead.model_validate(m) for m in self.list_rows()]

    def get_material(self, material_id: int) -> MaterialRead:
        return MaterialRead.model_validate(self.get_row(material_id))

    def create_material(self, data: MaterialCreate) -> MaterialRead:
        values = data.model_dump()
        values["tags"] = self.tag_policy.apply(data.tags)
        # Legacy threshold column, superseded by pack_size
        values["min_quantity"] = None

        return MaterialRead.model_validate(self.insert_row(values))

    def update_quantity(self, material_id: int, quantity: int) -> MaterialRead:
        """No floor is applied here; negative stock is stored as sent."""
        material = self.update_fields(material_id, {"quantity": quantity})
        return MaterialRead.model_validate(material)

    def list_tags(self) -> List[str]:
        return self.distinct_values(Material.tags)
