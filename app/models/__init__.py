"""SQLModel exports for all database tables."""

from .earnings_calendar import EarningsCalendarEntry
from .company_profile import CompanyProfile
from .report_asset import ReportAsset, PREVIEW_REPORT_TYPE

__all__ = [
    "EarningsCalendarEntry",
    "CompanyProfile",
    "ReportAsset",
    "PREVIEW_REPORT_TYPE",
]
