"""Vehicle CRUD endpoints."""

from fastapi import APIRouter, Depends, Request
from fleet_api.database import Store, get_store
from fleet_api.schemas.vehicle import VehicleIn, VehicleListOut, VehicleOut
from fleet_api.services import vehicle_service

router = APIRouter()


@router.get("/vehicle", response_model=list[VehicleListOut], summary="List vehicles with brand name")
def list_vehicles(request: Request, store: Store = Depends(get_store)):
    """Filter with e.g. ?type=truck, ?color=red,blue or ?brand=Fiat. 404 when nothing matches."""
    return vehicle_service.list_vehicles(store, dict(request.query_params))


@router.get("/vehicle/{vehicle_id}", response_model=VehicleOut, summary="Get a vehicle")
def get_vehicle(vehicle_id: int, store: Store = Depends(get_store)):
    return vehicle_service.get_vehicle(store, vehicle_id)


@router.post("/vehicle", response_model=str, summary="Register a vehicle")
def create_vehicle(body: VehicleIn, store: Store = Depends(get_store)):
    return vehicle_service.create_vehicle(
        store, body.name, body.type, body.license_plate,
        body.brand_id, body.mileage_km, body.color,
    )


@router.put("/vehicle/{vehicle_id}", response_model=str, summary="Replace a vehicle")
def update_vehicle(vehicle_id: int, body: VehicleIn, store: Store = Depends(get_store)):
    return vehicle_service.update_vehicle(
        store, vehicle_id, body.name, body.type, body.license_plate,
        body.brand_id, body.mileage_km, body.color,
    )


@router.delete("/vehicle/{vehicle_id}", response_model=str, summary="Delete a vehicle")
def delete_vehicle(vehicle_id: int, store: Store = Depends(get_store)):
    return vehicle_service.delete_vehicle(store, vehicle_id)
