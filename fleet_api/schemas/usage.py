from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UsageIn(BaseModel):
    driver_id: int
    vehicle_id: int
    reasoning: str


class UsageOut(BaseModel):
    id: int
    driver_id: int
    vehicle_id: int
    driver: Optional[str]      # driver name, None if the driver was deleted
    vehicle: Optional[str]     # vehicle name, None if the vehicle was deleted
    start_date: Optional[datetime]
    end_date: Optional[datetime]   # None while the record is open
    reasoning: str

    class Config:
        from_attributes = True
