"""Tests for the statistics functions."""

from datetime import date

import pytest

from milk_ledger.models import Vendor
from milk_ledger.queries import (
    available_months,
    chart_points,
    compute_monthly_stats,
    compute_vendor_stats,
    days_in_month,
    get_missed_days_for_month,
    has_entry_for_day,
    month_of,
)


class TestMonthlyStats:
    """Tests for compute_monthly_stats."""

    def test_empty_list_is_all_zeros(self):
        stats = compute_monthly_stats([])
        assert stats.total_quantity == 0
        assert stats.total_amount == 0
        assert stats.missed_days == 0

    def test_paid_and_pending_add_up(self, make_entry):
        """Test that paid and pending partition the total."""
        entries = [
            make_entry(date(2024, 3, 1), quantity=2, rate=50, is_paid=True),
            make_entry(date(2024, 3, 2), quantity=1.5, rate=55),
            make_entry(date(2024, 3, 3), quantity=0.5, rate=60, is_paid=True),
        ]
        stats = compute_monthly_stats(entries)

        assert stats.total_quantity == pytest.approx(4.0)
        assert stats.total_amount == pytest.approx(100 + 82.5 + 30)
        assert stats.total_paid == pytest.approx(130)
        assert stats.pending_amount == pytest.approx(82.5)
        assert stats.total_paid + stats.pending_amount == pytest.approx(stats.total_amount)

    def test_missed_days_counts_distinct_days(self, make_entry):
        """Test a 30-day month with two entries on one of 28 distinct days."""
        entries = [make_entry(date(2024, 4, day)) for day in range(1, 29)]
        entries.append(make_entry(date(2024, 4, 5), quantity=0.5))

        stats = compute_monthly_stats(entries)
        assert stats.missed_days == 2
        assert len(stats.entries) == 29

    def test_missed_days_uses_first_entry_month(self, make_entry):
        """Test that the month length comes from the first entry."""
        entries = [
            make_entry(date(2023, 2, 1)),
            make_entry(date(2023, 3, 1)),
        ]
        # February 2023 has 28 days, day 1 seen once across both months
        assert compute_monthly_stats(entries).missed_days == 27

    def test_single_entry_leap_february(self, make_entry):
        stats = compute_monthly_stats([make_entry(date(2024, 2, 10))])
        assert stats.missed_days == 28


class TestVendorStats:
    """Tests for compute_vendor_stats."""

    def test_only_vendor_entries_counted(self, make_entry, make_vendor):
        vendor = make_vendor("v1")
        entries = [
            make_entry(date(2024, 3, 1), quantity=2, rate=50, vendor_id="v1", is_paid=True),
            make_entry(date(2024, 3, 2), quantity=1, rate=50, vendor_id="v1"),
            make_entry(date(2024, 3, 2), quantity=5, rate=40, vendor_id="v2"),
        ]
        result = compute_vendor_stats(vendor, entries)

        assert result.id == "v1"
        assert result.name == "Fresh Dairy"
        assert result.total_quantity == pytest.approx(3)
        assert result.total_amount == pytest.approx(150)
        assert result.pending_amount == pytest.approx(50)

    def test_vendor_without_entries(self, make_vendor):
        result = compute_vendor_stats(make_vendor(), [])
        assert result.total_amount == 0
        assert isinstance(result, Vendor)


class TestDayHelpers:
    """Tests for missed days, month lists and chart points."""

    def test_days_in_month(self):
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2024, 12) == 31

    def test_missed_days_for_february(self, make_entry):
        missed = get_missed_days_for_month([make_entry(date(2023, 2, 1))], 2023, 2)
        assert missed == list(range(2, 29))

    def test_missed_days_ignores_other_months(self, make_entry):
        entries = [make_entry(date(2024, 3, 1)), make_entry(date(2024, 4, 2))]
        missed = get_missed_days_for_month(entries, 2024, 4)
        assert 1 in missed
        assert 2 not in missed
        assert len(missed) == 29

    def test_has_entry_for_day(self, make_entry):
        entries = [make_entry(date(2024, 3, 1))]
        assert has_entry_for_day(entries, date(2024, 3, 1))
        assert not has_entry_for_day(entries, date(2024, 3, 2))

    def test_available_months_newest_first(self, make_entry):
        entries = [
            make_entry(date(2024, 1, 3)),
            make_entry(date(2024, 3, 1)),
            make_entry(date(2023, 12, 31)),
            make_entry(date(2024, 3, 9)),
        ]
        assert available_months(entries) == ["2024-03", "2024-01", "2023-12"]

    def test_chart_points_sorted_by_date(self, make_entry):
        entries = [
            make_entry(date(2024, 3, 12), quantity=2, rate=50, is_paid=True),
            make_entry(date(2024, 3, 3), quantity=1, rate=50),
        ]
        points = chart_points(entries)

        assert [p.day for p in points] == ["03", "12"]
        assert points[1].amount == pytest.approx(100)
        assert points[1].paid is True

    def test_month_of(self):
        assert month_of(date(2024, 7, 31)) == "2024-07"
