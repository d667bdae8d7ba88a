from fastapi import APIRouter, Depends, Request
from fleet_api.database import Store, get_store
from fleet_api.schemas.driver import DriverIn, DriverOut
from fleet_api.services import driver_service

router = APIRouter()


@router.get("/driver", response_model=list[DriverOut], summary="List drivers")
def list_drivers(request: Request, store: Store = Depends(get_store)):
    """404 when nothing matches."""
    return driver_service.list_drivers(store, dict(request.query_params))


@router.get("/driver/{driver_id}", response_model=DriverOut, summary="Get a driver")
def get_driver(driver_id: int, store: Store = Depends(get_store)):
    return driver_service.get_driver(store, driver_id)


@router.post("/driver", response_model=str, summary="Create a driver")
def create_driver(body: DriverIn, store: Store = Depends(get_store)):
    return driver_service.create_driver(store, body.name)


@router.put("/driver/{driver_id}", response_model=str, summary="Rename a driver")
def update_driver(driver_id: int, body: DriverIn, store: Store = Depends(get_store)):
    return driver_service.update_driver(store, driver_id, body.name)


@router.delete("/driver/{driver_id}", response_model=str, summary="Delete a driver")
def delete_driver(driver_id: int, store: Store = Depends(get_store)):
    return driver_service.delete_driver(store, driver_id)
