"""Domain operations for EarningsCalendarEntry model - Read-only queries."""

from datetime import date
from typing import List
from sqlmodel import Session, select
from app.models import EarningsCalendarEntry


class EarningsCalendarOperations:
    """Read operations for the earnings calendar.

    Keep this class focused on data access only - no business logic.
    """

    @staticmethod
    def get_upcoming(session: Session, today: date, limit: int = 500) -> List[EarningsCalendarEntry]:
        """Get earnings entries scheduled on or after a date.

        Args:
            session: Database session
            today: First calendar date to include
            limit: Hard cap on returned rows (no pagination)

        Returns:
            Entries ordered by date ascending, at most `limit` of them
        """
        stmt = (
            select(EarningsCalendarEntry)
            .where(EarningsCalendarEntry.date >= today)
            .order_by(EarningsCalendarEntry.date.asc(), EarningsCalendarEntry.id.asc())
            .limit(limit)
        )
        return list(session.exec(stmt).all())
