"""Tests for ReportBuilder: timeframe reports, file names and the dashboard."""

import json
from datetime import date, datetime, timezone

import pytest

from milk_ledger.queries import ReportBuilder, ReportError


TODAY = date(2024, 3, 15)


@pytest.fixture
def builder(entry_repo, vendor_repo):
    return ReportBuilder(entry_repo, vendor_repo)


@pytest.fixture
def seeded(entry_repo, make_entry):
    """Two entries in March 2024 and one in February 2024."""
    entries = [
        make_entry(date(2024, 3, 1), quantity=2, rate=50, is_paid=True),
        make_entry(date(2024, 3, 2), quantity=1, rate=50),
        make_entry(date(2024, 2, 10), quantity=1, rate=45),
    ]
    for entry in entries:
        entry_repo.save(entry)
    return entries


class TestBuild:
    """Tests for ReportBuilder.build."""

    def test_current_month(self, builder, seeded):
        report = builder.build("current", today=TODAY)

        assert report.timeframe == "current"
        assert len(report.entries) == 2
        assert report.stats.total_amount == pytest.approx(150)
        assert report.stats.missed_days == 29
        assert report.missed_day_numbers == list(range(3, 32))

    def test_specific_month(self, builder, seeded):
        report = builder.build("2024-02", today=TODAY)

        assert [e.date for e in report.entries] == [date(2024, 2, 10)]
        assert report.stats.missed_days == 28
        assert 10 not in report.missed_day_numbers
        assert len(report.missed_day_numbers) == 28

    def test_all_has_no_missed_day_list(self, builder, seeded):
        report = builder.build("all", today=TODAY)

        assert len(report.entries) == 3
        assert report.stats.total_amount == pytest.approx(195)
        assert report.missed_day_numbers == []

    def test_empty_month(self, builder, seeded):
        """Test that a month without entries is reported as empty."""
        report = builder.build("2023-01", today=TODAY)

        assert report.is_empty
        assert report.stats.missed_days == 0
        assert report.missed_day_numbers == []

    def test_full_month_has_no_missed_days(self, builder, entry_repo, make_entry):
        for day in range(1, 29):
            entry_repo.save(make_entry(date(2023, 2, day)))

        report = builder.build("2023-02", today=TODAY)
        assert report.stats.missed_days == 0
        assert report.missed_day_numbers == []

    def test_unknown_timeframe(self, builder):
        with pytest.raises(ReportError):
            builder.build("last-week", today=TODAY)
        with pytest.raises(ReportError):
            builder.build("2024-13", today=TODAY)


class TestReportFiles:
    """Tests for file names and JSON report export."""

    def test_report_filename(self, builder):
        assert builder.report_filename("current", "csv", today=TODAY) == "milk-records-2024-03.csv"
        assert builder.report_filename("2023-11", ".json", today=TODAY) == "milk-records-2023-11.json"
        assert builder.report_filename("all", "csv", today=TODAY) == "milk-records.csv"

    def test_export_report_json(self, builder, seeded):
        report = builder.build("current", today=TODAY)
        exported_at = datetime(2024, 3, 15, 12, tzinfo=timezone.utc)

        text = ReportBuilder.export_report_json(report, exported_at=exported_at)
        payload = json.loads(text)

        assert len(payload["entries"]) == 2
        assert payload["entries"][0]["vendorId"] == "v1"
        assert payload["stats"]["totalAmount"] == pytest.approx(150)
        assert payload["stats"]["missedDays"] == 29
        assert "entries" not in payload["stats"]
        assert payload["exportedAt"] == "2024-03-15T12:00:00+00:00"
        assert text.startswith("{\n  ")


class TestDashboard:
    """Tests for the home screen summary."""

    def test_dashboard_without_vendors(self, builder):
        summary = builder.dashboard(today=TODAY)

        assert summary.has_vendors is False
        assert summary.entry_made_today is False
        assert summary.needs_todays_entry is False
        assert summary.stats.total_amount == 0

    def test_dashboard_prompts_for_todays_entry(self, builder, seeded, vendor_repo, make_vendor):
        vendor_repo.save(make_vendor())
        summary = builder.dashboard(today=TODAY)

        assert summary.needs_todays_entry is True
        assert summary.has_pending is True
        assert summary.stats.total_quantity == pytest.approx(3)

    def test_dashboard_with_todays_entry(self, builder, entry_repo, vendor_repo, make_vendor, make_entry):
        vendor_repo.save(make_vendor())
        entry_repo.save(make_entry(TODAY, is_paid=True))

        summary = builder.dashboard(today=TODAY)
        assert summary.entry_made_today is True
        assert summary.needs_todays_entry is False
        assert summary.has_pending is False
