"""Domain operations for CompanyProfile model - Read-only queries."""

from typing import Collection, List
from sqlmodel import Session, select
from app.models import CompanyProfile


class CompanyProfileOperations:
    """Read operations for company profiles."""

    @staticmethod
    def get_by_isins(session: Session, isins: Collection[str]) -> List[CompanyProfile]:
        """Get profiles for multiple ISINs.

        Args:
            session: Database session
            isins: ISINs to look up

        Returns:
            List of found profiles (may be shorter than input if some not found)
        """
        if not isins:
            return []
        stmt = select(CompanyProfile).where(CompanyProfile.isin.in_(list(isins)))
        return list(session.exec(stmt).all())
