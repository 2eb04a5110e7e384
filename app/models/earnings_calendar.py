"""EarningsCalendarEntry model - Upcoming earnings dates per security."""

import datetime as dt
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime


class EarningsCalendarEntry(SQLModel, table=True):
    """Scheduled earnings date for one security, inserted by the ingestion job."""

    __tablename__ = "earnings_calendar"

    id: Optional[int] = Field(default=None, primary_key=True)
    isin: str = Field(nullable=False, index=True)
    date: dt.date = Field(nullable=False, index=True)
    source: Optional[str] = Field(default=None)  # provenance label, free text
    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        sa_type=DateTime(timezone=True),
        nullable=False,
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1842,
                "isin": "US0378331005",
                "date": "2026-10-29",
                "source": "nasdaq",
                "created_at": "2026-10-12T06:00:03+00:00",
            }
        }
