"""Earnings Aggregator - Builds the enriched upcoming-earnings view model.

Flow for one page render:
1. Loads upcoming earnings entries (date >= today, ascending, capped)
2. Collects the distinct ISINs they reference
3. Looks up company profiles and preview reports for those ISINs concurrently
4. Left-joins both onto the entries through ISIN-keyed dicts

Every query runs in its own session. A failed query is logged and treated as
"no rows", so the aggregator degrades instead of raising.

Does NOT contain:
- SQL construction (delegates to domain)
- Display formatting (see formatting)
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, TypeVar

from sqlalchemy.orm import sessionmaker
from sqlmodel import Session

from app.db import get_session_context
from app.domain import (
    EarningsCalendarOperations,
    CompanyProfileOperations,
    ReportAssetOperations,
)
from app.models import EarningsCalendarEntry, CompanyProfile, ReportAsset, PREVIEW_REPORT_TYPE

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_UPCOMING_LIMIT = 500


def today_utc() -> date:
    """Current calendar date in UTC, time of day dropped."""
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class EnrichedEarningsRecord:
    """One earnings entry with its optional company profile and preview report."""

    entry: EarningsCalendarEntry
    company: Optional[CompanyProfile] = None
    report: Optional[ReportAsset] = None

    @property
    def id(self) -> Optional[int]:
        return self.entry.id

    @property
    def isin(self) -> str:
        return self.entry.isin

    @property
    def date(self) -> date:
        return self.entry.date

    @property
    def source(self) -> Optional[str]:
        return self.entry.source

    @property
    def created_at(self) -> datetime:
        return self.entry.created_at

    @property
    def preview_url(self) -> Optional[str]:
        return self.report.storage_url if self.report else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "isin": self.isin,
            "date": self.date.isoformat(),
            "source": self.source,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "company": self.company.model_dump() if self.company else None,
            "report": {
                "storage_url": self.report.storage_url,
                "generated_at": self.report.generated_at.isoformat() if self.report.generated_at else None,
            } if self.report else None,
        }


def collect_isins(entries: Iterable[EarningsCalendarEntry]) -> Set[str]:
    """Distinct, non-empty ISINs referenced by entries."""
    return {entry.isin for entry in entries if entry.isin and entry.isin.strip()}


def index_companies(profiles: Iterable[CompanyProfile]) -> Dict[str, CompanyProfile]:
    """ISIN -> profile. Later rows win on duplicate ISINs."""
    return {profile.isin: profile for profile in profiles}


def index_reports(reports: Iterable[ReportAsset]) -> Dict[str, ReportAsset]:
    """ISIN -> report, skipping reports without a storage URL. Later rows win."""
    return {report.isin: report for report in reports if report.storage_url}


def merge_records(
    entries: Iterable[EarningsCalendarEntry],
    companies: Dict[str, CompanyProfile],
    reports: Dict[str, ReportAsset],
) -> List[EnrichedEarningsRecord]:
    """Left-join lookups onto entries, preserving entry order."""
    return [
        EnrichedEarningsRecord(
            entry=entry,
            company=companies.get(entry.isin),
            report=reports.get(entry.isin),
        )
        for entry in entries
    ]


class EarningsAggregator:
    """Loads upcoming earnings enriched with company and preview report data.

    Usage:
        from app.db import create_db_engine, create_session_factory

        engine = create_db_engine(settings)
        aggregator = EarningsAggregator(create_session_factory(engine))
        records = aggregator.load_upcoming_earnings()
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        limit: int = DEFAULT_UPCOMING_LIMIT,
        report_type: int = PREVIEW_REPORT_TYPE,
    ):
        """Initialize the aggregator.

        Args:
            session_factory: Factory producing one session per query
            limit: Max upcoming entries loaded (default: 500)
            report_type: report_asset.report_type to attach (default: preview)
        """
        self.session_factory = session_factory
        self.limit = limit
        self.report_type = report_type

    def _run_query(self, label: str, query: Callable[[Session], List[T]]) -> List[T]:
        """Run one query in its own session; log failures and return no rows."""
        try:
            with get_session_context(self.session_factory) as session:
                return query(session)
        except Exception as e:
            logger.error(f"Failed to load {label}: {e}")
            return []

    def fetch_upcoming(self, today: date) -> List[EarningsCalendarEntry]:
        return self._run_query(
            "earnings calendar",
            lambda session: EarningsCalendarOperations.get_upcoming(session, today, limit=self.limit),
        )

    def fetch_companies(self, isins: Set[str]) -> List[CompanyProfile]:
        return self._run_query(
            "company profiles",
            lambda session: CompanyProfileOperations.get_by_isins(session, isins),
        )

    def fetch_reports(self, isins: Set[str]) -> List[ReportAsset]:
        return self._run_query(
            "preview reports",
            lambda session: ReportAssetOperations.get_by_isins(session, isins, report_type=self.report_type),
        )

    def load_upcoming_earnings(self, today: Optional[date] = None) -> List[EnrichedEarningsRecord]:
        """Load upcoming earnings entries with their enrichment.

        Args:
            today: Reference date (default: current UTC date)

        Returns:
            One record per upcoming entry, ordered by date ascending.
            Empty if the calendar query returned nothing or failed.
        """
        today = today or today_utc()

        entries = self.fetch_upcoming(today)
        if not entries:
            logger.info(f"No upcoming earnings on or after {today.isoformat()}")
            return []

        isins = collect_isins(entries)
        companies: List[CompanyProfile] = []
        reports: List[ReportAsset] = []

        if isins:
            # Both lookups depend only on the ISIN set; wait for both before merging
            with ThreadPoolExecutor(max_workers=2) as executor:
                companies_future = executor.submit(self.fetch_companies, isins)
                reports_future = executor.submit(self.fetch_reports, isins)
                companies = companies_future.result()
                reports = reports_future.result()

        records = merge_records(entries, index_companies(companies), index_reports(reports))

        logger.info(
            f"Loaded {len(records)} upcoming earnings "
            f"({len(isins)} ISINs, {len(companies)} profiles, {len(reports)} preview reports)"
        )
        return records
