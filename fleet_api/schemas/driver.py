from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class DriverIn(BaseModel):
    name: str


class DriverOut(BaseModel):
    id: int
    name: str
    registered_at: Optional[datetime]

    class Config:
        from_attributes = True
