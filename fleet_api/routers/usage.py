"""
Usage record endpoints.
POST /usage      : check a vehicle out to a driver (409 if either is busy).
PUT  /usage/{id} : no body; finalizes (checks the vehicle back in).
"""

from fastapi import APIRouter, Depends, Request
from fleet_api.database import Store, get_store
from fleet_api.schemas.usage import UsageIn, UsageOut
from fleet_api.services import usage_service

router = APIRouter()


@router.get("/usage", response_model=list[UsageOut], summary="List usage records")
def list_usage(request: Request, store: Store = Depends(get_store)):
    return usage_service.list_usage(store, dict(request.query_params))


@router.get("/usage/{usage_id}", response_model=UsageOut, summary="Get a usage record")
def get_usage(usage_id: int, store: Store = Depends(get_store)):
    return usage_service.get_usage(store, usage_id)


@router.post("/usage", response_model=str, summary="Open a usage record")
def create_usage(body: UsageIn, store: Store = Depends(get_store)):
    return usage_service.create_usage(store, body.driver_id, body.vehicle_id, body.reasoning)


@router.put("/usage/{usage_id}", response_model=str, summary="Finalize a usage record")
def finalize_usage(usage_id: int, store: Store = Depends(get_store)):
    return usage_service.finalize_usage(store, usage_id)


@router.delete("/usage/{usage_id}", response_model=str, summary="Delete a usage record")
def delete_usage(usage_id: int, store: Store = Depends(get_store)):
    return usage_service.delete_usage(store, usage_id)
