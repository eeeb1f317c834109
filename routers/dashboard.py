# routers/dashboard.py
from fastapi import APIRouter, Depends

from dependencies import get_record_store, verify_token
from models import User
from schemas.report import DashboardResponse
from services import metrics_service as metrics
from services.record_store import RecordStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

RECENT_PAYMENTS = 5


@router.get("", response_model=DashboardResponse, summary="Dashboard headline figures")
def get_dashboard(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     units = store.list("units")
     payments = store.list("payments", order_by="created_at", descending=True)
     return DashboardResponse(
          total_units=len(units),
          total_tenants=len(store.list("tenants")),
          monthly_revenue=metrics.monthly_revenue(units),
          occupancy_rate=metrics.occupancy_rate(units),
          collection_rate=metrics.collection_rate(payments),
          recent_payments=payments[:RECENT_PAYMENTS],
     )
