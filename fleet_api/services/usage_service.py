# fleet_api/services/usage_service.py
"""
Usage lifecycle: checking vehicles out to drivers and back in.

A record is open while end_date is NULL and closed once it is set.
Open → Closed is the only transition; a closed record stays closed and a
new checkout needs a new record.

A driver and a vehicle can each be bound to at most one open record.
create_usage checks both sides and inserts inside one transaction, and the
partial unique indexes on the usage table reject whatever a concurrent
request slips past those checks.
"""

from fleet_api.database import Store
from fleet_api.errors import ConflictError, NotFoundError, StoreError, ValidationError
from fleet_api.services.query_filter import build_filter_query
from fleet_api.utils.logger import get_logger

logger = get_logger(__name__)

DRIVER_IN_USE = "driver already in use"
VEHICLE_IN_USE = "vehicle already in use"
NOT_FOUND = "usage record not found"

# LEFT JOINs keep records whose driver or vehicle was deleted
BASE_QUERY = """
    SELECT
        usage.id,
        usage.driver_id,
        usage.vehicle_id,
        driver.name AS driver,
        vehicle.name AS vehicle,
        usage.start_date,
        usage.end_date,
        usage.reasoning
    FROM usage
    LEFT JOIN driver ON usage.driver_id = driver.id
    LEFT JOIN vehicle ON usage.vehicle_id = vehicle.id
    WHERE 1 = 1
"""

FILTERS = {
    "id": "usage.id",
    "driver_id": "usage.driver_id",
    "vehicle_id": "usage.vehicle_id",
    "reasoning": "usage.reasoning",
    "start_date": "usage.start_date",
    "end_date": "usage.end_date",
    "driver": "driver.name",
    "driver.name": "driver.name",
    "vehicle": "vehicle.name",
    "vehicle.name": "vehicle.name",
}


def list_usage(store: Store, filters: dict) -> list[dict]:
    query, params = build_filter_query(BASE_QUERY, filters, FILTERS)
    rows = store.query_all(f"{query} ORDER BY usage.id", params)
    if not rows:
        raise NotFoundError("no results")
    return rows


def get_usage(store: Store, usage_id: int) -> dict:
    rows = store.query_all(f"{BASE_QUERY} AND usage.id = ?", [usage_id])
    if not rows:
        raise NotFoundError(NOT_FOUND)
    return rows[0]


def create_usage(store: Store, driver_id: int, vehicle_id: int, reasoning: str) -> str:
    """Open a new record binding driver_id to vehicle_id."""
    if not reasoning.strip():
        raise ValidationError("reasoning must not be empty")

    with store.transaction() as tx:
        if tx.query_all(
            "SELECT id FROM usage WHERE driver_id = ? AND end_date IS NULL", [driver_id]
        ):
            logger.warning(f"[USAGE] Driver {driver_id} already has an open record")
            raise ConflictError(DRIVER_IN_USE)

        if tx.query_all(
            "SELECT id FROM usage WHERE vehicle_id = ? AND end_date IS NULL", [vehicle_id]
        ):
            logger.warning(f"[USAGE] Vehicle {vehicle_id} already has an open record")
            raise ConflictError(VEHICLE_IN_USE)

        try:
            tx.execute(
                "INSERT INTO usage (driver_id, vehicle_id, reasoning) VALUES (?, ?, ?)",
                [driver_id, vehicle_id, reasoning],
            )
        except StoreError as e:
            if not e.integrity:
                raise
            # Lost a race: the open-record index names the column that clashed
            if "usage.driver_id" in e.message:
                raise ConflictError(DRIVER_IN_USE) from e
            if "usage.vehicle_id" in e.message:
                raise ConflictError(VEHICLE_IN_USE) from e
            raise

    logger.info(f"[USAGE] Driver {driver_id} checked out vehicle {vehicle_id}: {reasoning}")
    return "Usage record created."


def finalize_usage(store: Store, usage_id: int) -> str:
    """Close an open record. Closing is terminal, so a closed record is a conflict."""
    with store.transaction() as tx:
        rows = tx.query_all("SELECT id, end_date FROM usage WHERE id = ?", [usage_id])
        if not rows:
            raise NotFoundError(NOT_FOUND)
        if rows[0]["end_date"] is not None:
            raise ConflictError("usage record already finalized")

        tx.execute(
            "UPDATE usage SET end_date = CURRENT_TIMESTAMP WHERE id = ? AND end_date IS NULL",
            [usage_id],
        )

    logger.info(f"[USAGE] Record {usage_id} finalized")
    return "Usage record finalized."


def delete_usage(store: Store, usage_id: int) -> str:
    with store.transaction() as tx:
        if not tx.query_all("SELECT id FROM usage WHERE id = ?", [usage_id]):
            raise NotFoundError(NOT_FOUND)
        tx.execute("DELETE FROM usage WHERE id = ?", [usage_id])

    logger.info(f"[USAGE] Record {usage_id} deleted")
    return "Usage record deleted."
