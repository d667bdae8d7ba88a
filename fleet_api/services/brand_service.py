# fleet_api/services/brand_service.py
"""
Brand CRUD. Unlike the other resources, an empty brand listing is not an
error: the catalog is seeded on first use and filters may legitimately
exclude every row.
"""

from fleet_api.config import settings
from fleet_api.database import Store
from fleet_api.errors import NotFoundError, ValidationError
from fleet_api.services.query_filter import build_filter_query
from fleet_api.utils.logger import get_logger

logger = get_logger(__name__)

BASE_QUERY = "SELECT id, name, country FROM brand WHERE 1 = 1"

FILTERS = {"id": "id", "name": "name", "country": "country"}

DEFAULT_BRANDS = [
    ("Audi", "Germany"),
    ("BMW", "Germany"),
    ("Citroën", "France"),
    ("Chevrolet", "United States"),
    ("Fiat", "Italy"),
    ("Ford", "United States"),
    ("Honda", "Japan"),
    ("Hyundai", "South Korea"),
    ("Jeep", "United States"),
    ("Kia", "South Korea"),
    ("Mercedes-Benz", "Germany"),
    ("Nissan", "Japan"),
    ("Peugeot", "France"),
    ("Renault", "France"),
    ("Toyota", "Japan"),
    ("Volkswagen", "Germany"),
]


def _validate(name: str, country: str):
    if len(name) < 2:
        raise ValidationError("brand name must be at least 2 characters")
    if len(country) < 3:
        raise ValidationError("brand country must be at least 3 characters")


def seed_default_brands(store: Store) -> bool:
    """Insert the default catalog if the brand table is empty. Returns True if seeded."""
    if store.query_all("SELECT id FROM brand LIMIT 1"):
        return False
    rows = ",".join("(?, ?)" for _ in DEFAULT_BRANDS)
    params = [field for brand in DEFAULT_BRANDS for field in brand]
    store.execute(f"INSERT INTO brand (name, country) VALUES {rows}", params)
    logger.info(f"Seeded {len(DEFAULT_BRANDS)} default brands")
    return True


def list_brands(store: Store, filters: dict) -> list[dict]:
    query, params = build_filter_query(BASE_QUERY, filters, FILTERS)
    if settings.SEED_BRANDS:
        seed_default_brands(store)
    return store.query_all(f"{query} ORDER BY id", params)


def get_brand(store: Store, brand_id: int) -> dict:
    rows = store.query_all(f"{BASE_QUERY} AND id = ?", [brand_id])
    if not rows:
        raise NotFoundError("brand not found")
    return rows[0]


def create_brand(store: Store, name: str, country: str) -> str:
    _validate(name, country)
    store.execute("INSERT INTO brand (name, country) VALUES (?, ?)", [name, country])
    logger.info(f"Brand created: {name} ({country})")
    return f'Brand created with name "{name}", country "{country}".'


def update_brand(store: Store, brand_id: int, name: str, country: str) -> str:
    _validate(name, country)
    updated = store.execute(
        "UPDATE brand SET name = ?, country = ? WHERE id = ?", [name, country, brand_id]
    )
    if not updated:
        raise NotFoundError("brand not found")
    logger.info(f"Brand {brand_id} updated: {name} ({country})")
    return f'Brand updated to "{name}", country "{country}".'


def delete_brand(store: Store, brand_id: int) -> str:
    if not store.execute("DELETE FROM brand WHERE id = ?", [brand_id]):
        raise NotFoundError("brand not found")
    logger.info(f"Brand {brand_id} deleted")
    return f'Brand "{brand_id}" removed.'
