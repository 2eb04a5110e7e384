"""ReportAsset model - Generated report documents per security."""

from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime

# report_type of the earnings preview report
PREVIEW_REPORT_TYPE = 6


class ReportAsset(SQLModel, table=True):
    """Externally generated report, referenced by storage URL."""

    __tablename__ = "report_asset"

    id: Optional[int] = Field(default=None, primary_key=True)
    isin: str = Field(nullable=False, index=True)
    report_type: int = Field(nullable=False, index=True)
    storage_url: Optional[str] = Field(default=None)
    generated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
