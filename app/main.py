"""
Application factory.

Settings are read once here and passed explicitly to the engine, the
aggregator and the route dependencies (via app.state).

Run with:
    uvicorn app.main:create_app --factory
"""

import logging
from typing import Optional

from fastapi import FastAPI

from app.api.v1.api import api_router
from app.core.config import Settings
from app.core.logging import configure_logging
from app.db import check_connection, create_db_engine, create_session_factory
from app.services import EarningsAggregator
from app.ui.routes import earnings as earnings_ui

logger = logging.getLogger(__name__)


def build_aggregator(settings: Settings) -> EarningsAggregator:
    """Engine, session factory and aggregator for the configured database."""
    engine = create_db_engine(settings)
    check_connection(engine)
    return EarningsAggregator(
        create_session_factory(engine),
        limit=settings.UPCOMING_LIMIT,
        report_type=settings.PREVIEW_REPORT_TYPE,
    )


def create_app(
    settings: Optional[Settings] = None,
    aggregator: Optional[EarningsAggregator] = None,
) -> FastAPI:
    """
    Build the dashboard application.

    Args:
        settings: Application settings (read from environment / .env if None).
            Missing database configuration raises a ValidationError here, so
            the process never starts serving.
        aggregator: Pre-built aggregator (built from settings if None)

    Returns:
        FastAPI: Configured application
    """
    settings = settings or Settings()
    configure_logging(settings)

    app = FastAPI(title=settings.PROJECT_NAME, debug=settings.DEBUG)
    app.state.settings = settings
    app.state.aggregator = aggregator or build_aggregator(settings)

    app.include_router(earnings_ui.router, tags=["ui"])
    app.include_router(api_router, prefix=settings.API_V1_STR)

    logger.info(f"{settings.PROJECT_NAME} ready")
    return app
