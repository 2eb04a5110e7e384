from fastapi import APIRouter, Depends

from app.core.dependencies import get_aggregator
from app.services import EarningsAggregator, summarize, today_utc

router = APIRouter()


@router.get("/upcoming")
def get_upcoming_earnings(aggregator: EarningsAggregator = Depends(get_aggregator)):
    today = today_utc()
    records = aggregator.load_upcoming_earnings(today)
    return {
        "today": today.isoformat(),
        "summary": summarize(records, today).to_dict(),
        "records": [record.to_dict() for record in records],
    }
