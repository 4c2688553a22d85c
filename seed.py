from datetime import timedelta
from loguru import logger
from sqlmodel import Session, SQLModel, select

from apparel_inventory.core.config import get_settings
from apparel_inventory.db.core import build_engine
from apparel_inventory.db.schema import Material, Order, OrderStatus
from apparel_inventory.models.base import utc_now
from apparel_inventory.models.material import MaterialCreate
from apparel_inventory.models.order import OrderCreate
from apparel_inventory.services.material import MaterialService
from apparel_inventory.services.order import OrderService
from apparel_inventory.services.policy import AllowedValues, DEFAULT_MATERIAL_TAGS


# 1. Starter materials, tagged from the material form's vocabulary
SAMPLE_MATERIALS = [
    {"name": "Black Cotton Tee", "color": "black", "size": "M",
     "quantity": 42, "pack_size": 12, "tags": ["Blanks", "Dark"]},
    {"name": "White Cotton Tee", "color": "white", "size": "L",
     "quantity": 8, "pack_size": 12, "tags": ["Blanks", "Neutral"]},
    {"name": "Rose Print Hoodie", "color": "pink", "size": "S",
     "quantity": 5, "pack_size": 6, "tags": ["Bright", "Floral Designs"]},
    {"name": "Sand Crewneck", "color": "beige", "size": "XL",
     "quantity": 20, "pack_size": 10, "tags": ["Neutral"]},
]

# 2. A couple of queued orders
SAMPLE_ORDERS = [
    {"order_from": "Acme", "contact_info": "buyer@acme.com",
     "description": "Red Fabric", "quantity": 5, "days_out": 7,
     "status": OrderStatus.CREATED},
    {"order_from": "Northwind Boutique", "contact_info": "+1 555 0100",
     "description": "Blank tees, mixed sizes", "quantity": 48, "days_out": 14,
     "status": OrderStatus.PROCESSING},
]


def seed_materials(session: Session) -> int:
    """Creates sample materials that do not exist yet (matched by name)."""
    logger.info("--- Seeding Materials ---")
    service = MaterialService(session, tag_policy=AllowedValues(DEFAULT_MATERIAL_TAGS))
    created = 0

    for data in SAMPLE_MATERIALS:
        existing = session.exec(
            select(Material).where(Material.name == data["name"])).first()
        if existing:
            logger.info(f"Existing Material: {data['name']}")
            continue

        service.create_material(MaterialCreate(**data))
        logger.info(f"Created Material: {data['name']}")
        created += 1

    return created


def seed_orders(session: Session) -> int:
    logger.info("--- Seeding Orders ---")
    service = OrderService(session)
    created = 0

    for data in SAMPLE_ORDERS:
        existing = session.exec(select(Order).where(
            Order.order_from == data["order_from"],
            Order.description == data["description"])).first()
        if existing:
            logger.info(f"Existing Order: {data['order_from']}")
            continue

        payload = {k: v for k, v in data.items() if k != "days_out"}
        payload["scheduled_delivery"] = utc_now() + timedelta(days=data["days_out"])
        service.create_order(OrderCreate(**payload))
        logger.info(f"Created Order: {data['order_from']}")
        created += 1

    return created


def main():
    engine = build_engine(get_settings())

    # Ensure tables exist (if not using Alembic)
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        try:
            seed_materials(session)
            seed_orders(session)
            logger.info("Database seeding completed successfully.")

        except Exception as e:
            session.rollback()
            logger.error(f"Seeding failed: {e}")
            raise e


if __name__ == "__main__":
    main()
