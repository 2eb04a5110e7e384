#!/usr/bin/env python3
"""CLI script for printing the upcoming earnings view in a terminal.

Usage:
    # Print the enriched calendar
    python scripts/show_upcoming_earnings.py

    # Only the first 20 rows
    python scripts/show_upcoming_earnings.py --limit 20

    # JSON output (same shape as /api/v1/earnings/upcoming)
    python scripts/show_upcoming_earnings.py --json

    # Verbose logging
    python scripts/show_upcoming_earnings.py --verbose
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(__file__).rsplit("/", 2)[0])

from pydantic import ValidationError

from app.core.config import Settings
from app.core.logging import LOG_FORMAT
from app.main import build_aggregator
from app.services import (
    EnrichedEarningsRecord,
    company_display_name,
    format_date,
    format_market_cap,
    summarize,
    ticker_line,
    today_utc,
)


# ANSI color codes
class Colors:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def print_header(text: str) -> None:
    """Print a formatted section header."""
    print(f"\n{Colors.BOLD}{Colors.BLUE}{'=' * 60}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.BLUE}{text}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.BLUE}{'=' * 60}{Colors.RESET}\n")


def print_error(text: str) -> None:
    """Print error message in red."""
    print(f"{Colors.RED}✗ {text}{Colors.RESET}")


def print_warning(text: str) -> None:
    """Print warning message in yellow."""
    print(f"{Colors.YELLOW}⚠ {text}{Colors.RESET}")


def print_record(record: EnrichedEarningsRecord) -> None:
    """Print one calendar line."""
    preview = f"{Colors.GREEN}preview{Colors.RESET}" if record.preview_url else ""
    print(
        f"  {format_date(record.date):<14}"
        f"{company_display_name(record)[:32]:<34}"
        f"{Colors.CYAN}{ticker_line(record)}{Colors.RESET}  "
        f"{format_market_cap(record.company.market_cap_millions if record.company else None):>8}  "
        f"{record.source or 'Unknown'}  {preview}"
    )


def setup_logging(verbose: bool) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def non_negative_int(value: str) -> int:
    """argparse type: integer >= 0."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Show upcoming earnings with company and preview data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--limit",
        type=non_negative_int,
        default=None,
        help="Print at most N rows (the query itself is capped by UPCOMING_LIMIT)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    try:
        settings = Settings()
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        return 2

    try:
        aggregator = build_aggregator(settings)
        today = today_utc()
        records = aggregator.load_upcoming_earnings(today)
        summary = summarize(records, today)
        shown = records[: args.limit] if args.limit is not None else records

        if args.json:
            output = {
                "today": today.isoformat(),
                "summary": summary.to_dict(),
                "records": [record.to_dict() for record in shown],
            }
            print(json.dumps(output, indent=2))
            return 0

        print_header(settings.PROJECT_NAME)
        print(f"  Total upcoming:  {summary.total}")
        print(f"  Reporting today: {summary.reporting_today}")
        print(f"  Sources:         {', '.join(summary.sources) or '—'}\n")

        if not shown:
            print_warning("No upcoming earnings found.")
            return 0

        for record in shown:
            print_record(record)
        return 0

    except KeyboardInterrupt:
        print_warning("\nInterrupted by user")
        return 130
    except Exception as e:
        print_error(f"Fatal error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
