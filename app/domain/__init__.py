"""Domain layer - Read-only data access for the dashboard tables.

This layer provides pure data access functions (no business logic).

Usage:
    from app.domain import EarningsCalendarOperations, CompanyProfileOperations

    with get_session_context(session_factory) as session:
        entries = EarningsCalendarOperations.get_upcoming(session, date.today())
        profiles = CompanyProfileOperations.get_by_isins(session, {e.isin for e in entries})
"""

from .earnings_calendar_operations import EarningsCalendarOperations
from .company_profile_operations import CompanyProfileOperations
from .report_asset_operations import ReportAssetOperations

__all__ = [
    "EarningsCalendarOperations",
    "CompanyProfileOperations",
    "ReportAssetOperations",
]
