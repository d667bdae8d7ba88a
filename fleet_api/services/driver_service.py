# fleet_api/services/driver_service.py
"""Driver CRUD. An empty listing is reported as NotFoundError("no results")."""

from fleet_api.database import Store
from fleet_api.errors import NotFoundError, ValidationError
from fleet_api.services.query_filter import build_filter_query
from fleet_api.utils.logger import get_logger

logger = get_logger(__name__)

BASE_QUERY = "SELECT id, name, registered_at FROM driver WHERE 1 = 1"

FILTERS = {"id": "id", "name": "name", "registered_at": "registered_at"}


def _validate(name: str):
    if len(name) < 3:
        raise ValidationError("driver name must be at least 3 characters")


def list_drivers(store: Store, filters: dict) -> list[dict]:
    query, params = build_filter_query(BASE_QUERY, filters, FILTERS)
    rows = store.query_all(f"{query} ORDER BY id", params)
    if not rows:
        raise NotFoundError("no results")
    return rows


def get_driver(store: Store, driver_id: int) -> dict:
    rows = store.query_all(f"{BASE_QUERY} AND id = ?", [driver_id])
    if not rows:
        raise NotFoundError("driver not found")
    return rows[0]


def create_driver(store: Store, name: str) -> str:
    _validate(name)
    store.execute("INSERT INTO driver (name) VALUES (?)", [name])
    logger.info(f"Driver created: {name}")
    return f'Driver created with name "{name}".'


def update_driver(store: Store, driver_id: int, name: str) -> str:
    _validate(name)
    if not store.execute("UPDATE driver SET name = ? WHERE id = ?", [name, driver_id]):
        raise NotFoundError("driver not found")
    logger.info(f"Driver {driver_id} renamed to {name}")
    return f'Driver name updated to "{name}".'


def delete_driver(store: Store, driver_id: int) -> str:
    if not store.execute("DELETE FROM driver WHERE id = ?", [driver_id]):
        raise NotFoundError("driver not found")
    logger.info(f"Driver {driver_id} deleted")
    return f'Driver "{driver_id}" removed.'
