from typing import Annotated
from fastapi import Depends, Path, Request
from sqlmodel import Session

from apparel_inventory.db.core import get_session
from apparel_inventory.services.material import MaterialService
from apparel_inventory.services.product import ProductService
from apparel_inventory.services.order import OrderService
from apparel_inventory.services.catalog import MAX_ROW_ID

# Path ids outside the integer primary key range are rejected with 422
RowId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


def get_material_service(
    request: Request,
    session: Session = Depends(get_session)
) -> MaterialService:
    """Creates a MaterialService bound to the request's session and tag policy."""
    return MaterialService(session, tag_policy=request.app.state.material_tags)


def get_product_service(
    request: Request,
    session: Session = Depends(get_session)
) -> ProductService:
    return ProductService(session, category_policy=request.app.state.product_categories)


def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    return OrderService(session)
