"""
Statistics Engine

Pure functions that reduce raw entry lists to the figures the ledger
shows. Nothing here reads or writes storage.

IMPORTANT: ``compute_monthly_stats`` counts missed days against the month
of the FIRST entry in its input. Callers must pre-filter to a single
month; entries from several months give a meaningless day count.
"""

import calendar
from datetime import date

from milk_ledger.models.records import MilkEntry, Vendor, month_key
from milk_ledger.models.stats import ChartPoint, MonthlyStats, VendorWithStats


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def compute_monthly_stats(entries: list[MilkEntry]) -> MonthlyStats:
    """
    Totals, paid/pending split and missed-day count for ``entries``.

    An empty list yields all zeros with ``missed_days == 0``.
    """
    total_quantity = 0.0
    total_amount = 0.0
    total_paid = 0.0
    pending_amount = 0.0

    for entry in entries:
        amount = entry.amount
        total_quantity += entry.quantity
        total_amount += amount
        if entry.is_paid:
            total_paid += amount
        else:
            pending_amount += amount

    if not entries:
        return MonthlyStats()

    first_date = entries[0].date
    days_with_entries = {entry.date.day for entry in entries}
    missed_days = days_in_month(first_date.year, first_date.month) - len(days_with_entries)

    return MonthlyStats(
        total_quantity=total_quantity,
        total_amount=total_amount,
        total_paid=total_paid,
        pending_amount=pending_amount,
        missed_days=missed_days,
        entries=entries,
    )


def compute_vendor_stats(vendor: Vendor, all_entries: list[MilkEntry]) -> VendorWithStats:
    """Totals over the entries delivered by ``vendor``."""
    total_quantity = 0.0
    total_amount = 0.0
    pending_amount = 0.0

    for entry in all_entries:
        if entry.vendor_id != vendor.id:
            continue
        amount = entry.amount
        total_quantity += entry.quantity
        total_amount += amount
        if not entry.is_paid:
            pending_amount += amount

    return VendorWithStats(
        **vendor.model_dump(),
        total_quantity=total_quantity,
        total_amount=total_amount,
        pending_amount=pending_amount,
    )


def get_missed_days_for_month(
    entries: list[MilkEntry],
    year: int,
    month: int,
) -> list[int]:
    """Ascending day numbers of (year, month) that have no entry."""
    days_with_entries = {
        entry.date.day
        for entry in entries
        if entry.date.year == year and entry.date.month == month
    }
    return [
        day for day in range(1, days_in_month(year, month) + 1)
        if day not in days_with_entries
    ]


def has_entry_for_day(entries: list[MilkEntry], day: date) -> bool:
    return any(entry.date == day for entry in entries)


def available_months(entries: list[MilkEntry]) -> list[str]:
    """Distinct YYYY-MM keys that have entries, newest first."""
    return sorted({entry.month_key for entry in entries}, reverse=True)


def chart_points(entries: list[MilkEntry]) -> list[ChartPoint]:
    """One chart bar per entry, oldest first."""
    return [
        ChartPoint(
            date=entry.date,
            day=f"{entry.date.day:02d}",
            quantity=entry.quantity,
            amount=entry.amount,
            paid=entry.is_paid,
        )
        for entry in sorted(entries, key=lambda e: e.date)
    ]


def month_of(day: date) -> str:
    return month_key(day.year, day.month)
