# routers/tenants.py
"""
Tenant API routes.

Adding a tenant marks the rented unit Occupied; removing one releases it.
Both go through the occupancy service so the unit row stays in step.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from dependencies import get_record_store, verify_token
from models import User
from schemas.tenant import TenantCreate, TenantResponse, TenantSummary
from services import metrics_service as metrics
from services import occupancy_service
from services.record_store import RecordStore

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.get("", response_model=List[TenantResponse], summary="List tenants")
def list_tenants(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     return store.list("tenants", order_by="name")


@router.get("/summary", response_model=TenantSummary, summary="Tenants page headline figures")
def tenants_summary(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     tenants = store.list("tenants")
     tenant_counts = metrics.status_counts(tenants, metrics.TENANT_STATUSES)
     payment_counts = metrics.status_counts(store.list("payments"), metrics.PAYMENT_STATUSES)
     return TenantSummary(
          total_tenants=len(tenants),
          active_leases=tenant_counts["Active"],
          pending_payments=payment_counts["Pending"],
          occupancy_rate=metrics.occupancy_rate(store.list("units")),
     )


@router.post(
     "",
     response_model=TenantResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Add a tenant",
)
def create_tenant(
     tenant_data: TenantCreate,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     """
     Create the tenant and mark their unit Occupied.

     - **unit**: must name an existing, unoccupied unit (unless the tenant is Inactive)
     """
     return occupancy_service.assign_tenant(store, tenant_data.model_dump())


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a tenant")
def delete_tenant(
     tenant_id: int,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     occupancy_service.release_tenant(store, tenant_id)
