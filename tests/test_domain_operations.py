"""Tests for the read-only domain operations against SQLite."""

from datetime import date

from sqlmodel import Session

from app.domain import CompanyProfileOperations, EarningsCalendarOperations, ReportAssetOperations
from conftest import TODAY, make_entry, make_profile, make_report


class TestEarningsCalendarOperations:

    def test_upcoming_filters_past_and_orders_ascending(self, engine, seed):
        seed(
            make_entry(isin="B", on=date(2026, 11, 2)),
            make_entry(isin="PAST", on=date(2026, 10, 17)),
            make_entry(isin="A", on=TODAY),
            make_entry(isin="C", on=date(2026, 10, 25)),
        )

        with Session(engine) as session:
            rows = EarningsCalendarOperations.get_upcoming(session, TODAY)

        assert [row.isin for row in rows] == ["A", "C", "B"]

    def test_upcoming_is_capped(self, engine, seed):
        seed(*[make_entry(isin=f"ISIN{i:03d}", on=date(2026, 11, 1)) for i in range(12)])

        with Session(engine) as session:
            rows = EarningsCalendarOperations.get_upcoming(session, TODAY, limit=5)

        assert len(rows) == 5

    def test_upcoming_empty(self, engine):
        with Session(engine) as session:
            assert EarningsCalendarOperations.get_upcoming(session, TODAY) == []


class TestCompanyProfileOperations:

    def test_get_by_isins(self, engine, seed):
        seed(make_profile("A"), make_profile("B"), make_profile("C"))

        with Session(engine) as session:
            rows = CompanyProfileOperations.get_by_isins(session, {"A", "C", "MISSING"})

        assert sorted(row.isin for row in rows) == ["A", "C"]

    def test_get_by_isins_empty_set(self, engine):
        with Session(engine) as session:
            assert CompanyProfileOperations.get_by_isins(session, set()) == []


class TestReportAssetOperations:

    def test_filters_report_type(self, engine, seed):
        seed(
            make_report("A"),
            make_report("A", report_type=2, storage_url="https://storage.example.com/other.pdf"),
            make_report("B", report_type=2),
        )

        with Session(engine) as session:
            rows = ReportAssetOperations.get_by_isins(session, {"A", "B"})

        assert [(row.isin, row.report_type) for row in rows] == [("A", 6)]

    def test_keeps_rows_without_url(self, engine, seed):
        seed(make_report("A", storage_url=None))

        with Session(engine) as session:
            rows = ReportAssetOperations.get_by_isins(session, {"A"})

        assert len(rows) == 1
        assert rows[0].storage_url is None

    def test_allows_several_reports_per_isin_and_type(self, engine, seed):
        seed(
            make_report("A", storage_url="https://storage.example.com/previews/a-v1.pdf"),
            make_report("A", storage_url="https://storage.example.com/previews/a-v2.pdf"),
        )

        with Session(engine) as session:
            rows = ReportAssetOperations.get_by_isins(session, {"A"})

        assert len(rows) == 2
        assert rows[0].id != rows[1].id
