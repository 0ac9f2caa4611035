"""
Derived Models

Everything in this module is computed on demand from stored entries
and is never persisted.
"""

import datetime as dt

from pydantic import Field

from milk_ledger.models.records import LedgerModel, MilkEntry, Vendor


class MonthlyStats(LedgerModel):
    """
    Aggregate figures for a list of entries (normally one month).

    ``total_paid + pending_amount == total_amount`` within float tolerance.
    """

    total_quantity: float = 0.0
    total_amount: float = 0.0
    total_paid: float = 0.0
    pending_amount: float = 0.0
    missed_days: int = Field(
        default=0,
        description="Calendar days of the month without any entry"
    )
    entries: list[MilkEntry] = Field(default_factory=list)


class VendorWithStats(Vendor):
    """A vendor together with totals over the entries that reference it."""

    total_quantity: float = 0.0
    total_amount: float = 0.0
    pending_amount: float = 0.0


class ChartPoint(LedgerModel):
    """One bar of the daily delivery chart."""

    date: dt.date
    day: str = Field(
        ...,
        description="Two-digit day of month used as the axis label"
    )
    quantity: float
    amount: float
    paid: bool


class Report(LedgerModel):
    """Entries and statistics for a report timeframe."""

    timeframe: str = Field(
        ...,
        description="'current', 'all' or a YYYY-MM month key"
    )
    entries: list[MilkEntry] = Field(default_factory=list)
    stats: MonthlyStats
    missed_day_numbers: list[int] = Field(
        default_factory=list,
        description="Days of the month without entries (empty for 'all')"
    )

    @property
    def is_empty(self) -> bool:
        return not self.entries


class DashboardSummary(LedgerModel):
    """What the home screen shows for the current month."""

    today: dt.date
    stats: MonthlyStats
    has_vendors: bool
    entry_made_today: bool

    @property
    def has_pending(self) -> bool:
        return self.stats.pending_amount > 0

    @property
    def needs_todays_entry(self) -> bool:
        """Today's delivery is missing and there is a vendor to record it for."""
        return self.has_vendors and not self.entry_made_today
