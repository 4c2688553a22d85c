from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv


load_dotenv()


def split_csv(value: str) -> Optional[frozenset]:
    """Comma separated setting -> frozenset, or None when empty."""
    items = [item.strip() for item in value.split(",") if item.strip()]
    return frozenset(items) if items else None


class Settings(BaseSettings):
    app_name: str = "Apparel Inventory API"
    debug: bool = False
    database_url: str = ""
    database_key: str = ""
    host: str = "127.0.0.1"
    port: int = 8000
    allowed_hosts: str = ""
    api_prefix: str = ""
    log_file: str = "logs/application.log"
    material_allowed_tags: str = ""
    product_allowed_categories: str = ""


@lru_cache
def get_settings() -> Settings:
    return Settings()
