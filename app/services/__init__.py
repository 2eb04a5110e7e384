"""Dashboard services.

- earnings_aggregator: Loads upcoming earnings and left-joins company/report data
- formatting: Pure display helpers and header summary
"""

from .earnings_aggregator import (
    EarningsAggregator,
    EnrichedEarningsRecord,
    today_utc,
)
from .formatting import (
    EarningsSummary,
    company_display_name,
    ticker_line,
    sector_line,
    format_market_cap,
    format_compact_currency,
    format_date,
    format_datetime,
    summarize,
)

__all__ = [
    # Aggregator
    "EarningsAggregator",
    "EnrichedEarningsRecord",
    "today_utc",
    # Formatting
    "EarningsSummary",
    "company_display_name",
    "ticker_line",
    "sector_line",
    "format_market_cap",
    "format_compact_currency",
    "format_date",
    "format_datetime",
    "summarize",
]
