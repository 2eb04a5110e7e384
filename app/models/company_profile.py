"""CompanyProfile model - Display metadata per security."""

from typing import Optional
from sqlmodel import SQLModel, Field


class CompanyProfile(SQLModel, table=True):
    """Company metadata keyed by ISIN, maintained outside this application."""

    __tablename__ = "company_profile"

    isin: str = Field(primary_key=True)
    friendly_name: Optional[str] = Field(default=None)  # preferred for display
    name: Optional[str] = Field(default=None)  # formal / legal name
    sector: Optional[str] = Field(default=None)
    industry: Optional[str] = Field(default=None)
    market_cap_millions: Optional[float] = Field(default=None)  # millions of currency units
    country: Optional[str] = Field(default=None)
    ticker: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "isin": "US0378331005",
                "friendly_name": "Apple",
                "name": "Apple Inc.",
                "sector": "Technology",
                "industry": "Consumer Electronics",
                "market_cap_millions": 3450000.0,
                "country": "US",
                "ticker": "AAPL",
            }
        }
