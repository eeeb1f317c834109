# schemas/payment.py
"""
Pydantic schemas for Payment API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentStatusEnum(str, Enum):
     """Payment status options."""
     PAID = "Paid"
     PENDING = "Pending"
     OVERDUE = "Overdue"


class PaymentCreate(BaseModel):
     """Schema for entering a payment."""
     tenant_name: str = Field(..., min_length=1, max_length=200)
     unit: Optional[str] = Field(None, max_length=50)
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Payment amount")
     status: PaymentStatusEnum = Field(default=PaymentStatusEnum.PENDING.value)
     payment_date: Optional[date] = Field(None, description="Date paid, or the date the rent is due")
     notes: Optional[str] = None

     model_config = ConfigDict(
          use_enum_values=True,
          json_schema_extra={
               "example": {
                    "tenant_name": "Jane Wanjiru",
                    "unit": "101",
                    "amount": 25000.00,
                    "status": "Pending",
                    "payment_date": "2026-03-01",
               }
          }
     )


class PaymentResponse(BaseModel):
     id: int
     tenant_name: str
     unit: Optional[str] = None
     amount: Optional[float] = None
     status: str
     payment_date: Optional[date] = None
     notes: Optional[str] = None
     created_at: Optional[datetime] = None


class PaymentSummary(BaseModel):
     """Payments page headline figures for the selected period."""
     period_label: str
     total_collected: float
     total_pending: float
     total_overdue: float
     pending_payments: int
     overdue_payments: int
     collection_rate: float
