"""
Report Builder

DESIGN DECISION: Reports are DETERMINISTIC views over stored entries.
A report is requested by timeframe:
- "current": the month containing ``today``
- "all":     every entry ever recorded
- "YYYY-MM": one specific month

The builder only filters and reduces what storage returns. It never
estimates: a month without entries is reported as empty.
"""

import json
import re
from datetime import date, datetime
from typing import Optional

from milk_ledger.models.records import MilkEntry, month_key, utc_now
from milk_ledger.models.stats import DashboardSummary, Report
from milk_ledger.queries.stats import (
    compute_monthly_stats,
    get_missed_days_for_month,
    has_entry_for_day,
)
from milk_ledger.repositories import MilkEntryRepository, VendorRepository


TIMEFRAME_CURRENT = "current"
TIMEFRAME_ALL = "all"

_MONTH_TIMEFRAME = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


class ReportError(ValueError):
    """The requested report cannot be built (e.g. unknown timeframe)."""
    pass


class ReportBuilder:
    """
    Builds timeframe reports and the dashboard summary.

    GUARANTEES:
    - Only returns real data from storage
    - Missed days are listed only for single-month timeframes
    """

    def __init__(
        self,
        entries: MilkEntryRepository,
        vendors: VendorRepository,
    ):
        self._entries = entries
        self._vendors = vendors

    def build(
        self,
        timeframe: str = TIMEFRAME_CURRENT,
        today: Optional[date] = None,
    ) -> Report:
        """Entries, statistics and missed days for ``timeframe``."""
        today = today or date.today()
        period = self.resolve_month(timeframe, today)

        all_entries = self._entries.get_all()
        if period is None:
            selected = list(all_entries)
        else:
            selected = entries_in_month(all_entries, *period)

        stats = compute_monthly_stats(selected)

        missed_day_numbers: list[int] = []
        if period is not None and stats.missed_days > 0:
            missed_day_numbers = get_missed_days_for_month(all_entries, *period)

        return Report(
            timeframe=timeframe,
            entries=selected,
            stats=stats,
            missed_day_numbers=missed_day_numbers,
        )

    def dashboard(self, today: Optional[date] = None) -> DashboardSummary:
        """Current-month summary for the home screen."""
        today = today or date.today()
        entries = self._entries.get_for_month(today.year, today.month)
        return DashboardSummary(
            today=today,
            stats=compute_monthly_stats(entries),
            has_vendors=len(self._vendors.get_all()) > 0,
            entry_made_today=has_entry_for_day(entries, today),
        )

    def resolve_month(
        self,
        timeframe: str,
        today: date,
    ) -> Optional[tuple[int, int]]:
        """
        (year, month) covered by ``timeframe``, or None for "all".

        Raises:
            ReportError: If the timeframe is not recognised
        """
        if timeframe == TIMEFRAME_ALL:
            return None
        if timeframe == TIMEFRAME_CURRENT:
            return today.year, today.month

        match = _MONTH_TIMEFRAME.match(timeframe)
        if not match:
            raise ReportError(
                f"Unknown timeframe: {timeframe!r}. "
                f"Use '{TIMEFRAME_CURRENT}', '{TIMEFRAME_ALL}' or YYYY-MM."
            )
        return int(match.group(1)), int(match.group(2))

    def report_filename(
        self,
        timeframe: str,
        extension: str,
        today: Optional[date] = None,
    ) -> str:
        """File name for a downloaded report, e.g. ``milk-records-2024-03.csv``."""
        today = today or date.today()
        period = self.resolve_month(timeframe, today)
        name = "milk-records"
        if period is not None:
            name += f"-{month_key(*period)}"
        return f"{name}.{extension.lstrip('.')}"

    @staticmethod
    def export_report_json(
        report: Report,
        exported_at: Optional[datetime] = None,
    ) -> str:
        """Pretty-printed JSON with the report's entries and statistics."""
        exported_at = exported_at or utc_now()
        stats = report.stats.model_dump(mode="json", by_alias=True, exclude={"entries"})
        payload = {
            "entries": [entry.to_storage_dict() for entry in report.entries],
            "stats": stats,
            "exportedAt": exported_at.isoformat(),
        }
        return json.dumps(payload, indent=2, ensure_ascii=False)


def entries_in_month(entries: list[MilkEntry], year: int, month: int) -> list[MilkEntry]:
    return [
        entry for entry in entries
        if entry.date.year == year and entry.date.month == month
    ]
