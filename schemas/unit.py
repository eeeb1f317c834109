# schemas/unit.py
"""
Pydantic schemas for Unit API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnitStatusEnum(str, Enum):
     """Unit occupancy status options."""
     OCCUPIED = "Occupied"
     VACANT = "Vacant"
     MAINTENANCE = "Maintenance"


class UnitCreate(BaseModel):
     """Schema for creating a unit. New units start Vacant unless under Maintenance."""
     unit_number: str = Field(..., min_length=1, max_length=50, description="Unit number, unique")
     floor: Optional[str] = Field(None, max_length=20)
     bedrooms: int = Field(1, ge=0)
     bathrooms: int = Field(1, ge=0)
     monthly_rent: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     status: UnitStatusEnum = Field(default=UnitStatusEnum.VACANT.value)

     model_config = ConfigDict(
          use_enum_values=True,
          json_schema_extra={
               "example": {
                    "unit_number": "101",
                    "floor": "1",
                    "bedrooms": 2,
                    "bathrooms": 1,
                    "monthly_rent": 25000,
                    "status": "Vacant",
               }
          }
     )


class UnitUpdate(BaseModel):
     """Schema for editing unit details. Occupancy is driven by tenants, not set here."""
     model_config = ConfigDict(use_enum_values=True)

     floor: Optional[str] = Field(None, max_length=20)
     bedrooms: Optional[int] = Field(None, ge=0)
     bathrooms: Optional[int] = Field(None, ge=0)
     monthly_rent: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     status: Optional[UnitStatusEnum] = None

     @field_validator("bedrooms", "bathrooms", "status")
     @classmethod
     def not_null(cls, v, info):
          """Leave a field out to keep it; these columns cannot be cleared."""
          if v is None:
               raise ValueError(f"{info.field_name} cannot be null")
          return v


class UnitResponse(BaseModel):
     id: int
     unit_number: str
     floor: Optional[str] = None
     bedrooms: int
     bathrooms: int
     monthly_rent: Optional[float] = None
     status: str
     tenant_name: Optional[str] = None
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None


class UnitSummary(BaseModel):
     total_units: int
     occupied_units: int
     vacant_units: int
     maintenance_units: int
     occupancy_rate: int
     monthly_revenue: float


class ReconcileChange(BaseModel):
     unit_number: str
     previous_status: str
     status: str
     tenant_name: Optional[str] = None


class ReconcileConflict(BaseModel):
     unit_number: str
     tenants: list[str]


class ReconcileResponse(BaseModel):
     updated: list[ReconcileChange]
     conflicts: list[ReconcileConflict]
