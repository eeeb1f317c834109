# routers/units.py
"""
Unit API routes.

Provides listing with search and status filter, the Units page summary,
create / edit / delete, and the occupancy reconciliation sweep.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from dependencies import get_record_store, verify_token
from models import User
from schemas.unit import (
     ReconcileResponse,
     UnitCreate,
     UnitResponse,
     UnitStatusEnum,
     UnitSummary,
     UnitUpdate,
)
from services import metrics_service as metrics
from services import occupancy_service
from services.record_store import RecordStore

router = APIRouter(prefix="/api/units", tags=["units"])


def _matches(unit: dict, term: str) -> bool:
     term = term.lower()
     return term in (unit.get("unit_number") or "").lower() or term in (unit.get("tenant_name") or "").lower()


@router.get("", response_model=List[UnitResponse], summary="List units")
def list_units(
     search: Optional[str] = Query(None, description="Matches unit number or tenant name"),
     status: Optional[UnitStatusEnum] = Query(None, description="Filter by status"),
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     filters = {"status": status.value} if status else None
     units = store.list("units", filters=filters, order_by="unit_number")
     if search:
          units = [u for u in units if _matches(u, search)]
     return units


@router.get("/summary", response_model=UnitSummary, summary="Units page headline figures")
def units_summary(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     units = store.list("units")
     counts = metrics.status_counts(units, metrics.UNIT_STATUSES)
     return UnitSummary(
          total_units=len(units),
          occupied_units=counts["Occupied"],
          vacant_units=counts["Vacant"],
          maintenance_units=counts["Maintenance"],
          occupancy_rate=metrics.occupancy_rate(units),
          monthly_revenue=metrics.monthly_revenue(units),
     )


@router.post(
     "",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a unit",
)
def create_unit(
     unit_data: UnitCreate,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     row = unit_data.model_dump()
     return occupancy_service.create_unit(store, row)


@router.post("/reconcile", response_model=ReconcileResponse, summary="Re-derive unit occupancy from tenants")
def reconcile_units(
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     return occupancy_service.reconcile_units(store)


@router.patch("/{unit_id}", response_model=UnitResponse, summary="Edit a unit")
def update_unit(
     unit_id: int,
     unit_data: UnitUpdate,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     patch = unit_data.model_dump(exclude_unset=True)
     return occupancy_service.update_unit(store, unit_id, patch)


@router.delete("/{unit_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a unit")
def delete_unit(
     unit_id: int,
     store: RecordStore = Depends(get_record_store),
     user: User = Depends(verify_token),
):
     """Occupied units cannot be deleted; remove the tenant first."""
     occupancy_service.delete_unit(store, unit_id)
