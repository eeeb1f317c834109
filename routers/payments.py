# routers/payments.py
"""
Payment API routes: entry, listing, the Payments page summary and
recording a pending/overdue payment as paid.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dependencies import get_record_store, verify_token
from models import User
from schemas.payment import PaymentCreate, PaymentResponse, PaymentStatusEnum, PaymentSummary
from services import metrics_service as metrics
from services.record_store import RecordStore

router = APIRouter(prefix="/api/payments", tags=["payments"])


def resolve_period(month: Optional[int], year: Optional[int]):
     """Selected (year, month), defaulting to the current month."""
     today = date.today()
     return year or today.year, month or today.month


@router.get("", response_model=List[PaymentResponse], summary="List payments, newest first")
def list_payments(
     status: Optional[PaymentStatusEnum] = Query(None, description="Filter by status"),
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     filters = {"status": status.value} if status else None
     return store.list("payments", filters=filters, order_by="created_at", descending=True)


@router.get("/summary", response_model=PaymentSummary, summary="Payments page headline figures")
def payments_summary(
     month: Optional[int] = Query(None, ge=1, le=12),
     year: Optional[int] = Query(None, ge=2000, le=2100),
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     """Figures cover payments dated in the selected month (default: this month)."""
     year, month = resolve_period(month, year)
     period = metrics.payments_in_month(store.list("payments"), year, month)
     counts = metrics.status_counts(period, metrics.PAYMENT_STATUSES)
     return PaymentSummary(
          period_label=metrics.month_label(year, month),
          total_collected=metrics.total_collected(period),
          total_pending=metrics.total_pending(period),
          total_overdue=metrics.total_overdue(period),
          pending_payments=counts["Pending"],
          overdue_payments=counts["Overdue"],
          collection_rate=metrics.collection_rate(period),
     )


@router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Enter a payment",
)
def create_payment(
     payment_data: PaymentCreate,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     row = payment_data.model_dump()
     if row["status"] == PaymentStatusEnum.PAID.value and row["payment_date"] is None:
          row["payment_date"] = date.today()
     return store.insert("payments", row)


@router.patch("/{payment_id}/record", response_model=PaymentResponse, summary="Record a payment as paid")
def record_payment(
     payment_id: int,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     payment = store.get("payments", payment_id)
     if not payment:
          raise HTTPException(status.HTTP_404_NOT_FOUND, f"Payment with ID {payment_id} not found")
     if payment["status"] == PaymentStatusEnum.PAID.value:
          raise HTTPException(status.HTTP_400_BAD_REQUEST, "Payment already recorded")
     # An existing due or paid date is kept
     return store.update("payments", payment_id, {
          "status": PaymentStatusEnum.PAID.value,
          "payment_date": payment["payment_date"] or date.today(),
     })


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a payment")
def delete_payment(
     payment_id: int,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     if not store.get("payments", payment_id):
          raise HTTPException(status.HTTP_404_NOT_FOUND, f"Payment with ID {payment_id} not found")
     store.delete("payments", payment_id)
