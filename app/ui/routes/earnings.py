"""
Earnings calendar dashboard page.
"""

from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.config import Settings
from app.core.dependencies import get_aggregator, get_settings
from app.services import (
    EarningsAggregator,
    EnrichedEarningsRecord,
    company_display_name,
    format_date,
    format_datetime,
    format_market_cap,
    sector_line,
    summarize,
    ticker_line,
    today_utc,
)
from app.services.formatting import PLACEHOLDER, UNKNOWN_SOURCE


router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def build_row(record: EnrichedEarningsRecord, tz: str) -> Dict[str, Any]:
    """Display strings for one table row."""
    report = record.report
    return {
        "key": record.id,
        "date": format_date(record.date),
        "company": company_display_name(record),
        "ticker_line": ticker_line(record),
        "sector_line": sector_line(record),
        "market_cap": format_market_cap(record.company.market_cap_millions if record.company else None),
        "source": record.source or UNKNOWN_SOURCE,
        "inserted": format_datetime(record.created_at, tz),
        "preview_url": record.preview_url,
        "preview_generated": format_datetime(report.generated_at, tz) if report and report.generated_at else None,
    }


@router.get("/", response_class=HTMLResponse)
def earnings_dashboard(
    request: Request,
    aggregator: EarningsAggregator = Depends(get_aggregator),
    settings: Settings = Depends(get_settings),
):
    """
    Upcoming earnings table with a header summary.
    """
    today = today_utc()
    records = aggregator.load_upcoming_earnings(today)
    summary = summarize(records, today)
    rows: List[Dict[str, Any]] = [build_row(record, settings.DISPLAY_TIMEZONE) for record in records]

    return templates.TemplateResponse(
        request,
        "earnings.html",
        {
            "title": settings.PROJECT_NAME,
            "summary": summary,
            "sources_text": ", ".join(summary.sources) or PLACEHOLDER,
            "rows": rows,
            "limit": settings.UPCOMING_LIMIT,
        },
    )
