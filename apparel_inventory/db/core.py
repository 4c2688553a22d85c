from loguru import logger
from fastapi import Request
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlmodel import Session, create_engine, text

from apparel_inventory.core.config import Settings
from apparel_inventory.core.exceptions import StoreUnavailable


def store_url(settings: Settings) -> URL:
    """
    Combines the store endpoint URL and access key. Both are required;
    there are no defaults.
    """
    if not settings.database_url or not settings.database_key:
        raise StoreUnavailable(
            "Store not configured. Set DATABASE_URL and DATABASE_KEY.")

    try:
        url = make_url(settings.database_url)
    except ArgumentError as e:
        raise StoreUnavailable(f"Invalid DATABASE_URL: {e}") from e

    # SQLite has no credentials; every other backend takes the key as password
    if url.get_backend_name() != "sqlite":
        url = url.set(password=settings.database_key)
    return url


def build_engine(settings: Settings) -> Engine:
    return create_engine(store_url(settings), echo=settings.debug)


def check_connection(engine: Engine):
    try:
        with Session(engine) as session:
            session.exec(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Store connection failed: {e}")
        raise StoreUnavailable(f"Store unreachable: {e}") from e


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
