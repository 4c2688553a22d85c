from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlalchemy.engine import Engine

from apparel_inventory.api.v1 import index
from apparel_inventory.api.v1 import materials
from apparel_inventory.api.v1 import products
from apparel_inventory.api.v1 import orders

from apparel_inventory.core.config import Settings, get_settings, split_csv
from apparel_inventory.core.logging import setup_logging
from apparel_inventory.db.core import build_engine, check_connection
from apparel_inventory.services.policy import AllowedValues


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Builds the application around one store engine.
    Without an explicit engine it is built from settings; a missing
    DATABASE_URL / DATABASE_KEY raises StoreUnavailable here.
    """
    if settings is None:
        settings = get_settings()
    if engine is None:
        engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Refuse to serve if the store cannot be reached
        check_connection(app.state.engine)
        logger.info(f"{settings.app_name} started")
        yield
        app.state.engine.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.state.engine = engine
    app.state.material_tags = AllowedValues(
        split_csv(settings.material_allowed_tags), field="tags")
    app.state.product_categories = AllowedValues(
        split_csv(settings.product_allowed_categories), field="categories")

    # Middlewares
    origins = []

    if settings.allowed_hosts:
        origins = settings.allowed_hosts.split(",")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    prefix = settings.api_prefix.rstrip("/")
    app.include_router(index.router, prefix=prefix)
    app.include_router(
        materials.router, prefix=f"{prefix}/materials", tags=["Materials"])
    app.include_router(
        products.router, prefix=f"{prefix}/products", tags=["Products"])
    app.include_router(
        orders.router, prefix=f"{prefix}/orders", tags=["Orders"])

    return app


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=None,
    )
