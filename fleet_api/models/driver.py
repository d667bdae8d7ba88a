from sqlalchemy import Column, Integer, String, DateTime, func
from fleet_api.database import Base


class Driver(Base):
    __tablename__ = "driver"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    registered_at = Column(DateTime, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Driver {self.id} {self.name}>"
