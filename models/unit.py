# models/unit.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, func
from .base import Base


class Unit(Base):
     """
     Unit model - a rentable unit in the managed building.

     status and tenant_name are denormalized copies kept in step with the
     tenants table by services.occupancy_service.
     """
     __tablename__ = "units"

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_number = Column(String(50), nullable=False, unique=True, index=True)
     floor = Column(String(20), nullable=True)
     bedrooms = Column(Integer, default=1, nullable=False)
     bathrooms = Column(Integer, default=1, nullable=False)
     monthly_rent = Column(Numeric(12, 2), nullable=True)
     status = Column(String(50), default="Vacant", nullable=False)  # Occupied, Vacant, Maintenance
     tenant_name = Column(String(200), nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_number='{self.unit_number}', status='{self.status}')>"
