# scripts/reconcile_units.py
"""Re-derive unit occupancy from the tenants table. Run from the repo root."""
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import LOG_LEVEL
from database import get_session_context
from services.occupancy_service import reconcile_units
from services.record_store import RecordStore

logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

with get_session_context() as db:
    result = reconcile_units(RecordStore(db))

print(f"Units updated: {len(result['updated'])}")
for change in result["updated"]:
    print(f"  {change['unit_number']}: {change['previous_status']} -> {change['status']}")
print(f"Conflicts: {len(result['conflicts'])}")
for conflict in result["conflicts"]:
    print(f"  {conflict['unit_number']}: {', '.join(conflict['tenants'])}")
