# fleet_api/routers/health.py
"""
System health check.
Returns status of backend + database.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fleet_api.database import Store, get_store
from fleet_api.errors import StoreError

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(store: Store = Depends(get_store)):
    result = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend": "ok",
        "database": "unknown",
    }

    try:
        store.query_all("SELECT 1")
        result["database"] = "ok"
    except StoreError as e:
        result["database"] = f"error: {e.message}"
        result["status"] = "degraded"

    return result
