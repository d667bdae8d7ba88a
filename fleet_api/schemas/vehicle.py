from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class VehicleIn(BaseModel):
    name: str
    type: str                # car | motorcycle | truck | bus (checked by the store)
    license_plate: str
    brand_id: int
    mileage_km: int = 0      # >= 0 (checked by the store)
    color: str


class VehicleOut(BaseModel):
    id: int
    name: str
    type: str
    license_plate: str
    brand_id: int
    mileage_km: int
    color: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class VehicleListOut(BaseModel):
    """List row: the vehicle plus its brand name."""
    id: int
    name: str
    type: str
    license_plate: str
    mileage_km: int
    brand_id: int
    brand: Optional[str]
    color: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
