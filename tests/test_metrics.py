"""Test the pure metrics functions behind dashboards and reports."""
from datetime import date

from services import metrics_service as metrics


def test_occupancy_rate_empty():
    assert metrics.occupancy_rate([]) == 0


def test_occupancy_rate_and_revenue():
    units = [
        {"status": "Occupied", "monthly_rent": 25000},
        {"status": "Vacant", "monthly_rent": 10000},
    ]
    assert metrics.occupancy_rate(units) == 50
    assert metrics.monthly_revenue(units) == 25000


def test_occupancy_rate_rounds_half_up():
    units = [{"status": "Occupied"}] + [{"status": "Vacant"}] * 7
    assert metrics.occupancy_rate(units) == 13


def test_occupancy_rate_stays_in_range():
    for occupied in range(0, 6):
        units = [{"status": "Occupied"}] * occupied + [{"status": "Maintenance"}] * (5 - occupied)
        assert 0 <= metrics.occupancy_rate(units) <= 100


def test_unknown_status_counts_in_denominator_only():
    units = [{"status": "Occupied"}, {"status": "Demolished"}]
    assert metrics.occupancy_rate(units) == 50


def test_missing_rent_counts_as_zero():
    units = [
        {"status": "Occupied", "monthly_rent": None},
        {"status": "Occupied"},
        {"status": "Occupied", "monthly_rent": 900},
    ]
    assert metrics.monthly_revenue(units) == 900
    assert metrics.occupancy_rate(units) == 100


def test_collection_rate_empty():
    assert metrics.collection_rate([]) == 0


def test_payment_totals():
    payments = [
        {"status": "Paid", "amount": 1000},
        {"status": "Pending", "amount": 500},
    ]
    assert metrics.total_collected(payments) == 1000
    assert metrics.total_pending(payments) == 500
    assert metrics.collection_rate(payments) == 50.0


def test_outstanding_and_expected():
    payments = [
        {"status": "Paid", "amount": 1000},
        {"status": "Pending", "amount": 500},
        {"status": "Overdue", "amount": 250},
        {"status": "Overdue", "amount": None},
    ]
    assert metrics.total_overdue(payments) == 250
    assert metrics.outstanding_balance(payments) == 750
    assert metrics.expected_revenue(payments) == 1750


def test_collection_rate_one_decimal():
    payments = [{"status": "Paid"}, {"status": "Pending"}, {"status": "Overdue"}]
    assert metrics.collection_rate(payments) == 33.3


def test_collection_rate_non_decreasing_as_rows_get_paid():
    payments = [{"status": "Pending"}] * 4
    previous = metrics.collection_rate(payments)
    for i in range(4):
        payments = payments[:i] + [{"status": "Paid"}] + payments[i + 1:]
        current = metrics.collection_rate(payments)
        assert current >= previous
        previous = current
    assert previous == 100.0


def test_six_month_trend_shape():
    trend = metrics.six_month_trend([], 2026, 3)
    assert len(trend) == 6
    assert [label for label, _ in trend] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
    assert all(total == 0.0 for _, total in trend)


def test_six_month_trend_sums_paid_only():
    payments = [
        {"status": "Paid", "amount": 800, "payment_date": date(2026, 2, 14)},
        {"status": "Paid", "amount": 200, "payment_date": "2026-02-01"},
        {"status": "Pending", "amount": 999, "payment_date": date(2026, 2, 20)},
        {"status": "Paid", "amount": 1000, "payment_date": date(2025, 12, 31)},
        {"status": "Paid", "amount": 50, "payment_date": date(2025, 6, 1)},
        {"status": "Paid", "amount": 70, "payment_date": None},
    ]
    trend = dict(metrics.six_month_trend(payments, 2026, 2))
    assert trend["Feb"] == 1000
    assert trend["Dec"] == 1000
    assert trend["Sep"] == 0.0
    assert "Jun" not in trend


def test_payments_in_month_skips_undated():
    payments = [
        {"status": "Paid", "payment_date": date(2026, 3, 5)},
        {"status": "Paid", "payment_date": date(2026, 4, 5)},
        {"status": "Paid", "payment_date": None},
    ]
    assert len(metrics.payments_in_month(payments, 2026, 3)) == 1


def test_status_counts():
    rows = [{"status": "Active"}, {"status": "Active"}, {"status": "Inactive"}, {"status": "Gone"}]
    assert metrics.status_counts(rows, metrics.TENANT_STATUSES) == {"Active": 2, "Pending": 0, "Inactive": 1}


def test_month_label():
    assert metrics.month_label(2026, 3) == "Mar 2026"
