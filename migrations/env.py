from alembic import context
from sqlalchemy import create_engine
from sqlmodel import SQLModel

from apparel_inventory.core.config import get_settings
from apparel_inventory.db.core import build_engine
from apparel_inventory.db import schema  # noqa: F401 registers the tables

config = context.config
target_metadata = SQLModel.metadata


def run_migrations_offline():
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    url = config.get_main_option("sqlalchemy.url")
    if url:
        engine = create_engine(url)
    else:
        engine = build_engine(get_settings())

    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
