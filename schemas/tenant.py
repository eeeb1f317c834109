# schemas/tenant.py
"""
Pydantic schemas for Tenant API request/response validation.
"""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TenantStatusEnum(str, Enum):
     ACTIVE = "Active"
     PENDING = "Pending"
     INACTIVE = "Inactive"


class TenantCreate(BaseModel):
     """Schema for adding a tenant. `unit` is the unit_number being rented."""
     name: str = Field(..., min_length=1, max_length=200)
     unit: Optional[str] = Field(None, max_length=50, description="Unit number (exact match)")
     phone: Optional[str] = Field(None, max_length=50)
     email: Optional[str] = Field(None, max_length=255)
     lease_start: Optional[date] = None
     status: TenantStatusEnum = Field(default=TenantStatusEnum.ACTIVE.value)
     notes: Optional[str] = None

     model_config = ConfigDict(
          use_enum_values=True,
          json_schema_extra={
               "example": {
                    "name": "Jane Wanjiru",
                    "unit": "101",
                    "phone": "+254 700 123456",
                    "email": "jane@example.com",
                    "lease_start": "2026-01-15",
                    "status": "Active",
               }
          }
     )


class TenantResponse(BaseModel):
     id: int
     name: str
     unit: Optional[str] = None
     phone: Optional[str] = None
     email: Optional[str] = None
     lease_start: Optional[date] = None
     status: str
     notes: Optional[str] = None
     created_at: Optional[datetime] = None


class TenantSummary(BaseModel):
     total_tenants: int
     active_leases: int
     pending_payments: int
     occupancy_rate: int
