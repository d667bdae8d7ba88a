"""
Fleet vehicles. type, color and mileage are guarded by CHECK constraints
only; the service layer does not pre-validate them.
"""

from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func,
)
from fleet_api.database import Base

VEHICLE_TYPES = ("car", "motorcycle", "truck", "bus")
VEHICLE_COLORS = ("red", "blue", "green", "yellow", "gray", "black", "white")


def _one_of(column, values):
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


class Vehicle(Base):
    __tablename__ = "vehicle"
    __table_args__ = (
        CheckConstraint(_one_of("type", VEHICLE_TYPES), name="ck_vehicle_type"),
        CheckConstraint(_one_of("color", VEHICLE_COLORS), name="ck_vehicle_color"),
        CheckConstraint("mileage_km >= 0", name="ck_vehicle_mileage_km"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    license_plate = Column(String(20), unique=True, nullable=False, index=True)
    type = Column(String(20), nullable=False)
    brand_id = Column(Integer, ForeignKey("brand.id"), nullable=False)
    mileage_km = Column(Integer, nullable=False, server_default="0")
    color = Column(String(20), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Vehicle {self.id} {self.name} plate={self.license_plate}>"
