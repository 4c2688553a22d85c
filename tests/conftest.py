from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from apparel_inventory.core.config import Settings
from apparel_inventory.db import schema  # noqa: F401 registers the tables
from apparel_inventory.main import create_app


def make_settings(**overrides) -> Settings:
    values = dict(
        database_url="sqlite://",
        database_key="test-key",
        api_prefix="",
        log_file="",
        material_allowed_tags="",
        product_allowed_categories="",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


def parse_timestamp(value: str) -> datetime:
    """Wire timestamps end in Z, which fromisoformat only accepts from 3.11."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings, engine):
    app = create_app(settings=settings, engine=engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def material_payload():
    return {
        "name": "Black Cotton Tee",
        "color": "black",
        "size": "M",
        "quantity": 24,
        "packSize": 12,
        "tags": ["Blanks", "Dark"],
        "imageUrl": "https://cdn.example.com/black-tee.png",
    }


@pytest.fixture
def order_payload():
    return {
        "orderFrom": "Acme",
        "contactInfo": "a@x.com",
        "description": "Red Fabric",
        "quantity": 5,
        "scheduledDelivery": "2025-01-01T00:00:00Z",
        "status": "CREATED",
    }


@pytest.fixture
def product_payload():
    return {
        "name": "Classic Hoodie",
        "description": "Heavyweight fleece",
        "stock": 10,
        "image": "hoodie.png",
        "categories": ["Outerwear", "Basics"],
        "sizes": ["S", "M", "L"],
        "colors": ["grey", "navy"],
    }
