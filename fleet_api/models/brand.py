"""
Vehicle brands (manufacturers). Seeded with a default catalog
by brand_service.list_brands when the table is empty.
"""

from sqlalchemy import Column, Integer, String
from fleet_api.database import Base


class Brand(Base):
    __tablename__ = "brand"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    country = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Brand {self.id} {self.name} ({self.country})>"
