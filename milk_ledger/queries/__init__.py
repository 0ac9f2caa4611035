"""Statistics and report package."""

from milk_ledger.queries.reports import (
    TIMEFRAME_ALL,
    TIMEFRAME_CURRENT,
    ReportBuilder,
    ReportError,
    entries_in_month,
)
from milk_ledger.queries.stats import (
    available_months,
    chart_points,
    compute_monthly_stats,
    compute_vendor_stats,
    days_in_month,
    get_missed_days_for_month,
    has_entry_for_day,
    month_of,
)

__all__ = [
    "TIMEFRAME_ALL",
    "TIMEFRAME_CURRENT",
    "ReportBuilder",
    "ReportError",
    "available_months",
    "chart_points",
    "compute_monthly_stats",
    "compute_vendor_stats",
    "days_in_month",
    "entries_in_month",
    "get_missed_days_for_month",
    "has_entry_for_day",
    "month_of",
]
