# models/tenant.py
from sqlalchemy import Column, Integer, String, Date, Text, DateTime, func
from .base import Base


class Tenant(Base):
     """
     Tenant model - a person renting one of the units.

     `unit` holds the unit_number as a string, not a foreign key.
     """
     __tablename__ = "tenants"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(200), nullable=False)
     unit = Column(String(50), nullable=True, index=True)

     # Contact
     phone = Column(String(50), nullable=True)
     email = Column(String(255), nullable=True)

     lease_start = Column(Date, nullable=True)
     status = Column(String(50), default="Active", nullable=False)  # Active, Pending, Inactive
     notes = Column(Text, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}', unit='{self.unit}')>"
