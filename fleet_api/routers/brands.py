"""Brand CRUD endpoints. GET /brand accepts any allowed column as a query-string filter."""

from fastapi import APIRouter, Depends, Request
from fleet_api.database import Store, get_store
from fleet_api.schemas.brand import BrandIn, BrandOut
from fleet_api.services import brand_service

router = APIRouter()


@router.get("/brand", response_model=list[BrandOut], summary="List brands")
def list_brands(request: Request, store: Store = Depends(get_store)):
    """Filter with e.g. ?country=Japan or ?name=Fiat,Ford. No match returns []."""
    return brand_service.list_brands(store, dict(request.query_params))


@router.get("/brand/{brand_id}", response_model=BrandOut, summary="Get a brand")
def get_brand(brand_id: int, store: Store = Depends(get_store)):
    return brand_service.get_brand(store, brand_id)


@router.post("/brand", response_model=str, summary="Create a brand")
def create_brand(body: BrandIn, store: Store = Depends(get_store)):
    return brand_service.create_brand(store, body.name, body.country)


@router.put("/brand/{brand_id}", response_model=str, summary="Replace a brand")
def update_brand(brand_id: int, body: BrandIn, store: Store = Depends(get_store)):
    return brand_service.update_brand(store, brand_id, body.name, body.country)


@router.delete("/brand/{brand_id}", response_model=str, summary="Delete a brand")
def delete_brand(brand_id: int, store: Store = Depends(get_store)):
    return brand_service.delete_brand(store, brand_id)
