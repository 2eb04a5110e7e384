"""
Pytest configuration and fixtures for the earnings dashboard tests.

Fixtures provide:
- Settings that never read the real environment's .env
- A file-backed SQLite database with the dashboard tables
- Factories for earnings entries, company profiles and report assets
"""

import os
import sys
from datetime import date, datetime, timezone

import pytest
from sqlmodel import SQLModel, Session, create_engine

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import Settings
from app.db import create_session_factory
from app.models import CompanyProfile, EarningsCalendarEntry, ReportAsset, PREVIEW_REPORT_TYPE

TODAY = date(2026, 10, 18)


# =============================================================================
# Settings
# =============================================================================

@pytest.fixture
def settings():
    """Minimal valid settings (derived Supabase URL)."""
    return Settings(
        _env_file=None,
        SUPABASE_PROJECT_ID="abcdefghijkl",
        SUPABASE_DB_PASSWORD="s3cret",
    )


# =============================================================================
# Database
# =============================================================================

@pytest.fixture
def engine(tmp_path):
    """SQLite engine; one connection per thread so lookups can run concurrently."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'earnings.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def seed(engine):
    """Insert rows and commit. Usage: seed(entry, profile, ...)."""

    def _seed(*rows):
        with Session(engine) as session:
            session.add_all(rows)
            session.commit()

    return _seed


# =============================================================================
# Row factories
# =============================================================================

def make_entry(isin="US0378331005", on=TODAY, source="nasdaq", id=None, created_at=None):
    return EarningsCalendarEntry(
        id=id,
        isin=isin,
        date=on,
        source=source,
        created_at=created_at or datetime(2026, 10, 12, 6, 0, tzinfo=timezone.utc),
    )


def make_profile(isin="US0378331005", **fields):
    defaults = {
        "friendly_name": "Apple",
        "name": "Apple Inc.",
        "sector": "Technology",
        "industry": "Consumer Electronics",
        "market_cap_millions": 3450000.0,
        "country": "US",
        "ticker": "AAPL",
    }
    defaults.update(fields)
    return CompanyProfile(isin=isin, **defaults)


def make_report(isin="US0378331005", storage_url="https://storage.example.com/previews/aapl.pdf",
                report_type=PREVIEW_REPORT_TYPE, generated_at=None):
    return ReportAsset(
        isin=isin,
        report_type=report_type,
        storage_url=storage_url,
        generated_at=generated_at or datetime(2026, 10, 17, 21, 30, tzinfo=timezone.utc),
    )
