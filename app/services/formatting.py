"""Display helpers for the earnings dashboard.

Pure functions of a record or value. Missing or malformed fields fall back to
a placeholder instead of raising.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Optional, Union
from zoneinfo import ZoneInfo

from .earnings_aggregator import EnrichedEarningsRecord

PLACEHOLDER = "—"
UNKNOWN_SOURCE = "Unknown"
TICKER_SEPARATOR = " · "

# (threshold, suffix), largest first
_COMPACT_UNITS = [
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def company_display_name(record: EnrichedEarningsRecord) -> str:
    """Friendly name, then formal name, then the bare ISIN."""
    company = record.company
    if company:
        name = _clean(company.friendly_name) or _clean(company.name)
        if name:
            return name
    return record.isin


def ticker_line(record: EnrichedEarningsRecord) -> str:
    """Join ticker, ISIN and country, skipping empty parts."""
    company = record.company
    parts = [
        _clean(company.ticker) if company else "",
        _clean(record.isin),
        _clean(company.country) if company else "",
    ]
    line = TICKER_SEPARATOR.join(part for part in parts if part)
    return line or record.isin


def sector_line(record: EnrichedEarningsRecord) -> str:
    """'Sector / Industry' of whichever parts are present, else empty."""
    company = record.company
    if not company:
        return ""
    return " / ".join(part for part in (_clean(company.sector), _clean(company.industry)) if part)


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _round_half_up(value: float, places: str = "0.1") -> Decimal:
    # str() first so 1.25 stays 1.25 instead of its binary expansion
    return Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def _trim_decimal(value: Decimal) -> str:
    text = f"{value:.1f}"
    return text[:-2] if text.endswith(".0") else text


def format_compact_currency(amount: float, symbol: str = "$") -> str:
    """Format an amount as e.g. $1.5B / $250M / $12K with at most one decimal, halves rounded up."""
    sign = "-" if amount < 0 else ""
    magnitude = abs(amount)

    for index, (threshold, suffix) in enumerate(_COMPACT_UNITS):
        if magnitude >= threshold:
            scaled = _round_half_up(magnitude / threshold)
            # 999.96M rounds to 1000.0M, show it as 1B instead
            if scaled >= 1000 and index > 0:
                bigger_threshold, bigger_suffix = _COMPACT_UNITS[index - 1]
                return f"{sign}{symbol}{_trim_decimal(_round_half_up(magnitude / bigger_threshold))}{bigger_suffix}"
            return f"{sign}{symbol}{_trim_decimal(scaled)}{suffix}"

    rounded = _round_half_up(magnitude, "1")
    if rounded >= 1000:
        return f"{sign}{symbol}1K"
    return f"{sign}{symbol}{rounded}"


def format_market_cap(millions: Any) -> str:
    """Market cap given in millions, formatted compactly. Placeholder if unusable."""
    number = _to_float(millions)
    if number is None:
        return PLACEHOLDER
    return format_compact_currency(number * 1_000_000)


def _parse_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def format_date(value: Union[date, str, None]) -> str:
    """e.g. 'Oct 18, 2026'."""
    if not value:
        return PLACEHOLDER
    try:
        d = _parse_date(value)
    except ValueError:
        return str(value)
    return f"{d:%b} {d.day}, {d.year}"


def format_datetime(value: Union[datetime, str, None], tz: str = "UTC") -> str:
    """e.g. 'Oct 18, 2026, 14:05 UTC'. Naive timestamps are taken as UTC."""
    if not value:
        return PLACEHOLDER
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(ZoneInfo(tz))
    return f"{local:%b} {local.day}, {local.year}, {local:%H:%M} {local.tzname()}"


@dataclass
class EarningsSummary:
    """Header figures for the dashboard."""

    total: int = 0
    reporting_today: int = 0
    sources: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total": self.total,
            "reporting_today": self.reporting_today,
            "sources": self.sources,
        }


def summarize(records: Iterable[EnrichedEarningsRecord], today: date) -> EarningsSummary:
    """Count records, records dated today, and distinct sources in first-seen order."""
    summary = EarningsSummary()
    today_iso = today.isoformat()
    for record in records:
        summary.total += 1
        if _parse_date(record.date).isoformat() == today_iso:
            summary.reporting_today += 1
        source = record.source or UNKNOWN_SOURCE
        if source not in summary.sources:
            summary.sources.append(source)
    return summary
