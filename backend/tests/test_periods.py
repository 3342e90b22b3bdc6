# backend/tests/test_periods.py

from datetime import date, datetime, timedelta, timezone

from app.services.periods import ReportPeriod, as_aware, period_start, within_period


def test_week_is_seven_days_before_now(now):
    assert period_start(ReportPeriod.WEEK, now) == now - timedelta(days=7)


def test_month_starts_on_first_day_at_midnight(now):
    assert period_start(ReportPeriod.MONTH, now) == datetime(2025, 6, 1, tzinfo=timezone.utc)


def test_quarter_and_year_boundaries(now):
    assert period_start(ReportPeriod.QUARTER, now) == datetime(2025, 4, 1, tzinfo=timezone.utc)
    assert period_start(ReportPeriod.YEAR, now) == datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_within_period_is_inclusive(now):
    rows = [
        {"id": "start", "created_at": datetime(2025, 6, 1, tzinfo=timezone.utc)},
        {"id": "now", "created_at": now},
        {"id": "future", "created_at": now + timedelta(seconds=1)},
        {"id": "before", "created_at": datetime(2025, 5, 31, 23, 59, tzinfo=timezone.utc)},
        {"id": "missing", "created_at": None},
    ]
    assert [r["id"] for r in within_period(rows, "created_at", ReportPeriod.MONTH, now)] == ["start", "now"]


def test_naive_and_string_values_are_treated_as_utc():
    assert as_aware(datetime(2025, 1, 1, 8)).tzinfo == timezone.utc
    assert as_aware("2025-01-01T08:00:00Z") == datetime(2025, 1, 1, 8, tzinfo=timezone.utc)
    assert as_aware(date(2025, 1, 1)) == datetime(2025, 1, 1, tzinfo=timezone.utc)
