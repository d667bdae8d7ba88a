# fleet_api/services/vehicle_service.py
"""
Vehicle CRUD.
Only name and license plate lengths are checked here. type, color and
mileage_km are left to the table's CHECK constraints, so a bad value
comes back from the store as StoreError.
"""

from fleet_api.database import Store
from fleet_api.errors import NotFoundError, ValidationError
from fleet_api.services.query_filter import build_filter_query
from fleet_api.utils.logger import get_logger

logger = get_logger(__name__)

# LEFT JOIN keeps vehicles whose brand was deleted (brand comes back NULL)
LIST_QUERY = """
    SELECT
        vehicle.id,
        vehicle.name,
        vehicle.type,
        vehicle.license_plate,
        vehicle.mileage_km,
        vehicle.brand_id,
        brand.name AS brand,
        vehicle.color,
        vehicle.created_at
    FROM vehicle
    LEFT JOIN brand ON vehicle.brand_id = brand.id
    WHERE 1 = 1
"""

GET_QUERY = """
    SELECT id, name, type, license_plate, brand_id, mileage_km, color, created_at
    FROM vehicle
    WHERE id = ?
"""

FILTERS = {
    "id": "vehicle.id",
    "vehicle.id": "vehicle.id",
    "name": "vehicle.name",
    "vehicle.name": "vehicle.name",
    "type": "vehicle.type",
    "vehicle.type": "vehicle.type",
    "license_plate": "vehicle.license_plate",
    "mileage_km": "vehicle.mileage_km",
    "color": "vehicle.color",
    "brand_id": "vehicle.brand_id",
    "created_at": "vehicle.created_at",
    "brand": "brand.name",
    "brand.name": "brand.name",
}


def _validate(name: str, license_plate: str):
    if len(name) < 3:
        raise ValidationError("vehicle name must be at least 3 characters")
    if len(license_plate) < 7:
        raise ValidationError("license plate must be at least 7 characters")


def list_vehicles(store: Store, filters: dict) -> list[dict]:
    query, params = build_filter_query(LIST_QUERY, filters, FILTERS)
    rows = store.query_all(f"{query} ORDER BY vehicle.id", params)
    if not rows:
        raise NotFoundError("no results")
    return rows


def get_vehicle(store: Store, vehicle_id: int) -> dict:
    rows = store.query_all(GET_QUERY, [vehicle_id])
    if not rows:
        raise NotFoundError("vehicle not found")
    return rows[0]


def create_vehicle(store: Store, name: str, type: str, license_plate: str,
                   brand_id: int, mileage_km: int, color: str) -> str:
    _validate(name, license_plate)
    store.execute(
        "INSERT INTO vehicle (name, type, license_plate, brand_id, mileage_km, color) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        [name, type, license_plate, brand_id, mileage_km, color],
    )
    logger.info(f"Vehicle created: {name} plate={license_plate}")
    return f'Vehicle created with name "{name}", plate "{license_plate}".'


def update_vehicle(store: Store, vehicle_id: int, name: str, type: str, license_plate: str,
                   brand_id: int, mileage_km: int, color: str) -> str:
    _validate(name, license_plate)
    updated = store.execute(
        "UPDATE vehicle SET name = ?, type = ?, license_plate = ?, brand_id = ?, "
        "mileage_km = ?, color = ? WHERE id = ?",
        [name, type, license_plate, brand_id, mileage_km, color, vehicle_id],
    )
    if not updated:
        raise NotFoundError("vehicle not found")
    logger.info(f"Vehicle {vehicle_id} updated: {name} plate={license_plate}")
    return f'Vehicle updated to "{name}", plate "{license_plate}".'


def delete_vehicle(store: Store, vehicle_id: int) -> str:
    if not store.execute("DELETE FROM vehicle WHERE id = ?", [vehicle_id]):
        raise NotFoundError("vehicle not found")
    logger.info(f"Vehicle {vehicle_id} deleted")
    return f'Vehicle "{vehicle_id}" removed.'
