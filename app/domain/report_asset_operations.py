"""Domain operations for ReportAsset model - Read-only queries."""

from typing import Collection, List
from sqlmodel import Session, select
from app.models import ReportAsset, PREVIEW_REPORT_TYPE


class ReportAssetOperations:
    """Read operations for generated report assets."""

    @staticmethod
    def get_by_isins(
        session: Session,
        isins: Collection[str],
        report_type: int = PREVIEW_REPORT_TYPE,
    ) -> List[ReportAsset]:
        """Get report assets of one type for multiple ISINs.

        Args:
            session: Database session
            isins: ISINs to look up
            report_type: Report type discriminant (default: preview report)

        Returns:
            Matching assets, including ones without a storage URL
        """
        if not isins:
            return []
        stmt = select(ReportAsset).where(
            ReportAsset.report_type == report_type,
            ReportAsset.isin.in_(list(isins)),
        )
        return list(session.exec(stmt).all())
