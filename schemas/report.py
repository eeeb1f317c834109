# schemas/report.py
from typing import List

from pydantic import BaseModel

from schemas.payment import PaymentResponse


class ChartPoint(BaseModel):
     label: str
     value: float


class ReportResponse(BaseModel):
     """Monthly report: period headline figures, six-month trend, occupancy."""
     year: int
     month: int
     period_label: str
     total_collected: float
     expected_revenue: float
     outstanding_balance: float
     collection_rate: float
     monthly_trend: List[ChartPoint]
     occupancy: List[ChartPoint]
     occupancy_rate: int


class DashboardResponse(BaseModel):
     total_units: int
     total_tenants: int
     monthly_revenue: float
     occupancy_rate: int
     collection_rate: float
     recent_payments: List[PaymentResponse]
