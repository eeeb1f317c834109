# services/report_service.py
"""
Monthly payment report assembled from the Metrics Engine.

Scope: the headline figures (collected, outstanding, expected, collection
rate) cover payments dated in the selected month; the trend covers the six
months ending there; occupancy reflects the units as they are now.
"""
from typing import Sequence

from services import metrics_service as metrics


def build_report(payments: Sequence[dict], units: Sequence[dict], year: int, month: int) -> dict:
     period = metrics.payments_in_month(payments, year, month)
     occupancy = metrics.status_counts(units, metrics.UNIT_STATUSES)

     return {
          "year": year,
          "month": month,
          "period_label": metrics.month_label(year, month),
          "total_collected": metrics.total_collected(period),
          "expected_revenue": metrics.expected_revenue(period),
          "outstanding_balance": metrics.outstanding_balance(period),
          "collection_rate": metrics.collection_rate(period),
          "monthly_trend": [
               {"label": label, "value": value}
               for label, value in metrics.six_month_trend(payments, year, month)
          ],
          "occupancy": [{"label": status, "value": count} for status, count in occupancy.items()],
          "occupancy_rate": metrics.occupancy_rate(units),
     }
