"""
Usage (checkout/return) records. end_date NULL means the record is open.
The partial unique indexes allow one open record per driver and per vehicle,
so the rule holds even when two requests race past the service checks.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text, func, text
from fleet_api.database import Base

OPEN = text("end_date IS NULL")


class Usage(Base):
    __tablename__ = "usage"
    __table_args__ = (
        Index("uq_usage_open_driver", "driver_id", unique=True, sqlite_where=OPEN),
        Index("uq_usage_open_vehicle", "vehicle_id", unique=True, sqlite_where=OPEN),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    driver_id = Column(Integer, ForeignKey("driver.id"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicle.id"), nullable=False, index=True)
    start_date = Column(DateTime, server_default=func.current_timestamp())
    end_date = Column(DateTime)
    reasoning = Column(Text, nullable=False)

    def __repr__(self):
        state = "open" if self.end_date is None else "closed"
        return f"<Usage {self.id} driver={self.driver_id} vehicle={self.vehicle_id} {state}>"
