# services/occupancy_service.py
"""
Unit occupancy consistency.

A unit's `status` and `tenant_name` are copies of what the tenants table
says. They are kept in step here:

1. assign_tenant: create tenant, then mark the unit Occupied
2. release_tenant: delete tenant, then mark the unit Vacant
3. create_unit / update_unit / delete_unit: occupancy never set or dropped by hand

Both writes of a pair run inside one RecordStore.atomic() block, so the
tenant write is rolled back when the unit write fails.

reconcile_units re-derives every unit from the tenants table and repairs
drift left by older data or direct edits.
"""
import logging
from typing import Dict, List, Optional

from services.exceptions import NotFound, ValidationFailed
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

OCCUPIED = "Occupied"
VACANT = "Vacant"
MAINTENANCE = "Maintenance"


def occupies_unit(tenant: dict) -> bool:
     """Active and Pending tenants hold their unit; Inactive ones do not."""
     return bool(tenant.get("unit")) and tenant.get("status") != "Inactive"


def find_unit(store: RecordStore, unit_number: str) -> Optional[dict]:
     """Unit whose unit_number equals `unit_number` exactly, or None."""
     matches = store.list("units", filters={"unit_number": unit_number}, limit=1)
     return matches[0] if matches else None


def assign_tenant(store: RecordStore, tenant_row: dict) -> dict:
     """
     Create a tenant and mark the unit it rents as Occupied.

     Raises:
          ValidationFailed: unit does not exist or is already Occupied
     """
     unit = None
     if occupies_unit(tenant_row):
          unit_number = tenant_row["unit"]
          unit = find_unit(store, unit_number)
          if unit is None:
               raise ValidationFailed(f"Unit {unit_number} does not exist")
          if unit["status"] == OCCUPIED:
               raise ValidationFailed(
                    f"Unit {unit_number} is already occupied by {unit.get('tenant_name') or 'another tenant'}"
               )

     with store.atomic():
          tenant = store.insert("tenants", tenant_row)
          if unit is not None:
               store.update("units", unit["id"], {"status": OCCUPIED, "tenant_name": tenant["name"]})

     logger.info("Tenant %s created for unit %s", tenant["id"], tenant.get("unit"))
     return tenant


def release_tenant(store: RecordStore, tenant_id: int) -> dict:
     """
     Delete a tenant and mark the unit it rented as Vacant.

     The unit is only touched when this tenant is its recorded occupant.

     Returns the deleted tenant row.
     """
     tenant = store.get("tenants", tenant_id)
     if tenant is None:
          raise NotFound(f"Tenant with ID {tenant_id} not found")

     unit = find_unit(store, tenant["unit"]) if occupies_unit(tenant) else None
     if unit is not None and unit.get("tenant_name") != tenant["name"]:
          # Someone else is recorded as the occupant
          unit = None

     with store.atomic():
          store.delete("tenants", tenant_id)
          if unit is not None:
               # A unit under Maintenance keeps that status
               patch = {"tenant_name": None}
               if unit["status"] == OCCUPIED:
                    patch["status"] = VACANT
               store.update("units", unit["id"], patch)

     logger.info("Tenant %s removed; unit %s released", tenant_id, tenant.get("unit"))
     return tenant


def create_unit(store: RecordStore, unit_row: dict) -> dict:
     """Insert a unit. New units are Vacant or under Maintenance, never Occupied."""
     if unit_row.get("status") == OCCUPIED:
          raise ValidationFailed("A unit becomes Occupied by adding a tenant to it")
     if find_unit(store, unit_row["unit_number"]) is not None:
          raise ValidationFailed(f"Unit {unit_row['unit_number']} already exists")
     return store.insert("units", unit_row)


def update_unit(store: RecordStore, unit_id: int, patch: dict) -> dict:
     """Edit unit details. Occupancy itself only changes through tenants."""
     unit = store.get("units", unit_id)
     if unit is None:
          raise NotFound(f"Unit with ID {unit_id} not found")

     new_status = patch.get("status")
     if new_status is not None and new_status != unit["status"]:
          if new_status == OCCUPIED:
               raise ValidationFailed("A unit becomes Occupied by adding a tenant to it")
          if unit["status"] == OCCUPIED:
               raise ValidationFailed(
                    f"Unit {unit['unit_number']} is occupied; remove the tenant first"
               )
     return store.update("units", unit_id, patch)


def delete_unit(store: RecordStore, unit_id: int) -> None:
     """Delete a unit unless someone lives in it."""
     unit = store.get("units", unit_id)
     if unit is None:
          raise NotFound(f"Unit with ID {unit_id} not found")
     if unit["status"] == OCCUPIED:
          raise ValidationFailed(
               f"Cannot delete unit {unit['unit_number']} while it is occupied; remove the tenant first"
          )
     store.delete("units", unit_id)


def reconcile_units(store: RecordStore) -> Dict[str, List[dict]]:
     """
     Recompute unit status and tenant_name from the tenants table.

     Units under Maintenance are left alone. A unit referenced by more than
     one occupying tenant is reported as a conflict and not changed.

     Returns:
          {"updated": [...], "conflicts": [...]}
     """
     tenants = store.list("tenants")
     occupants: Dict[str, List[dict]] = {}
     for tenant in tenants:
          if occupies_unit(tenant):
               occupants.setdefault(tenant["unit"], []).append(tenant)

     updated: List[dict] = []
     conflicts: List[dict] = []

     with store.atomic():
          for unit in store.list("units", order_by="unit_number"):
               if unit["status"] == MAINTENANCE:
                    continue
               holders = occupants.get(unit["unit_number"], [])
               if len(holders) > 1:
                    conflicts.append({
                         "unit_number": unit["unit_number"],
                         "tenants": [t["name"] for t in holders],
                    })
                    continue

               if holders:
                    wanted = {"status": OCCUPIED, "tenant_name": holders[0]["name"]}
               else:
                    wanted = {"status": VACANT, "tenant_name": None}

               if unit["status"] != wanted["status"] or unit.get("tenant_name") != wanted["tenant_name"]:
                    store.update("units", unit["id"], wanted)
                    updated.append({
                         "unit_number": unit["unit_number"],
                         "previous_status": unit["status"],
                         "status": wanted["status"],
                         "tenant_name": wanted["tenant_name"],
                    })

     for change in updated:
          logger.warning(
               "Reconciled unit %s: %s -> %s",
               change["unit_number"], change["previous_status"], change["status"],
          )
     for conflict in conflicts:
          logger.warning("Unit %s has several occupying tenants: %s", conflict["unit_number"], conflict["tenants"])

     return {"updated": updated, "conflicts": conflicts}
