# services/metrics_service.py
"""
Metrics Engine - dashboard and report figures derived from fetched rows.

Every function is pure: it takes an already materialized sequence of row
mappings (as returned by RecordStore.list) and returns a scalar or a small
labelled series. Nothing here touches the database.

Rules shared by all functions:
- empty input gives a zero result, never a division error
- a missing or None amount/rent counts as 0 and the row still counts
- unknown status strings count in denominators but never in numerators
"""
import math
from datetime import date, datetime
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

UNIT_STATUSES = ("Occupied", "Vacant", "Maintenance")
TENANT_STATUSES = ("Active", "Pending", "Inactive")
PAYMENT_STATUSES = ("Paid", "Pending", "Overdue")

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

Row = Mapping[str, object]


def _round_half_up(value: float, digits: int = 0) -> float:
     factor = 10 ** digits
     return math.floor(value * factor + 0.5) / factor


def _number(row: Row, field: str) -> float:
     value = row.get(field)
     if value is None:
          return 0.0
     try:
          return float(value)
     except (TypeError, ValueError):
          return 0.0


def _with_status(rows: Iterable[Row], status: str) -> List[Row]:
     return [row for row in rows if row.get("status") == status]


def _sum(rows: Iterable[Row], field: str) -> float:
     return sum((_number(row, field) for row in rows), 0.0)


def month_key(value) -> Optional[Tuple[int, int]]:
     """(year, month) of a date, datetime or ISO date string; None if absent/unparseable."""
     if value is None:
          return None
     if isinstance(value, (date, datetime)):
          return value.year, value.month
     text = str(value)
     try:
          return int(text[0:4]), int(text[5:7])
     except ValueError:
          return None


def month_label(year: int, month: int) -> str:
     return f"{MONTHS[month - 1]} {year}"


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

def occupancy_rate(units: Sequence[Row]) -> int:
     """Whole-number percentage of units that are Occupied."""
     if not units:
          return 0
     occupied = len(_with_status(units, "Occupied"))
     return int(_round_half_up(occupied / len(units) * 100))


def monthly_revenue(units: Sequence[Row]) -> float:
     """Rent roll of the occupied units."""
     return _sum(_with_status(units, "Occupied"), "monthly_rent")


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------

def collection_rate(payments: Sequence[Row]) -> float:
     """Share of payments marked Paid, as a percentage with one decimal."""
     if not payments:
          return 0.0
     paid = len(_with_status(payments, "Paid"))
     return _round_half_up(paid / len(payments) * 100, 1)


def total_collected(payments: Sequence[Row]) -> float:
     return _sum(_with_status(payments, "Paid"), "amount")


def total_pending(payments: Sequence[Row]) -> float:
     return _sum(_with_status(payments, "Pending"), "amount")


def total_overdue(payments: Sequence[Row]) -> float:
     return _sum(_with_status(payments, "Overdue"), "amount")


def outstanding_balance(payments: Sequence[Row]) -> float:
     return total_pending(payments) + total_overdue(payments)


def expected_revenue(payments: Sequence[Row]) -> float:
     return total_collected(payments) + outstanding_balance(payments)


def payments_in_month(payments: Sequence[Row], year: int, month: int) -> List[Row]:
     """Payments dated inside the given calendar month; undated rows are left out."""
     return [p for p in payments if month_key(p.get("payment_date")) == (year, month)]


def six_month_trend(payments: Sequence[Row], year: int, month: int) -> List[Tuple[str, float]]:
     """
     Paid totals for the six calendar months ending at (year, month).

     Returns exactly six (label, total) pairs, oldest first. A month with no
     paid rows yields 0.0.
     """
     buckets: List[Tuple[int, int]] = []
     for offset in range(5, -1, -1):
          index = year * 12 + (month - 1) - offset
          buckets.append((index // 12, index % 12 + 1))

     totals: Dict[Tuple[int, int], float] = {bucket: 0.0 for bucket in buckets}
     for payment in _with_status(payments, "Paid"):
          key = month_key(payment.get("payment_date"))
          if key in totals:
               totals[key] += _number(payment, "amount")

     return [(MONTHS[m - 1], totals[(y, m)]) for y, m in buckets]


# ---------------------------------------------------------------------------
# Generic
# ---------------------------------------------------------------------------

def status_counts(rows: Sequence[Row], statuses: Sequence[str]) -> Dict[str, int]:
     """Count rows per known status, in the order given. Unknown statuses are not listed."""
     counts = {status: 0 for status in statuses}
     for row in rows:
          status = row.get("status")
          if status in counts:
               counts[status] += 1
     return counts
