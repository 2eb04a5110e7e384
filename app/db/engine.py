"""
Database connection and session management.

Uses synchronous SQLAlchemy with NullPool pattern.
Connection pooling delegated to pgBouncer (Supabase pooler) at infrastructure level.

The engine is built once at process entry from an explicit Settings object
and handed to whoever needs it; nothing here runs at import time.
"""

from typing import Generator
from contextlib import contextmanager
from sqlmodel import Session, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from sqlalchemy.orm import sessionmaker
from sqlalchemy import text
import logging

from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the read-only dashboard engine.

    Args:
        settings: Validated application settings

    Returns:
        Engine: SQLAlchemy engine using psycopg3 (sync) with NullPool
    """
    url = settings.database_url

    # Don't log the password
    logger.info("===== EARNINGS DATABASE CONNECTION INFO =====")
    logger.info(f"Database driver: {url.drivername}")
    logger.info(f"Database host: {url.host}")
    logger.info(f"Database port: {url.port}")
    logger.info(f"Database name: {url.database}")
    logger.info(f"Database schema: {settings.DB_SCHEMA or 'default search_path'}")

    # NullPool avoids double-pooling with pgBouncer
    engine = create_engine(
        url,
        poolclass=NullPool,      # Let pgBouncer handle all pooling
        pool_pre_ping=True,      # Verify connections before use
        echo=settings.DEBUG,     # Log SQL queries when DEBUG=true
        connect_args={
            "prepare_threshold": None  # Disable prepared statements for pgBouncer transaction mode
        }
    )

    # Models are declared without a schema, map them onto the configured one
    if settings.DB_SCHEMA:
        engine = engine.execution_options(schema_translate_map={None: settings.DB_SCHEMA})

    logger.info("Database engine configured with:")
    logger.info(f"  - Pooling: NullPool (delegated to pgBouncer)")
    logger.info(f"  - Health checks: Enabled (pool_pre_ping=True)")
    logger.info(f"  - SQL echo: {settings.DEBUG}")
    logger.info(f"  - Prepared statements: Disabled (pgBouncer compatibility)")

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Create the session factory bound to an engine.

    expire_on_commit=False keeps loaded rows readable after the session closes,
    which the aggregator relies on when it merges results from several sessions.
    """
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


@contextmanager
def get_session_context(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Does NOT commit - every query in this application is a read.

    Usage:
        with get_session_context(session_factory) as session:
            rows = EarningsCalendarOperations.get_upcoming(session, today)

    Yields:
        Session: Database session
    """
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def check_connection(engine: Engine) -> bool:
    """
    Test the database connection with SELECT 1.

    A failure is logged, not raised: an unreachable database degrades the
    dashboard to its empty state instead of preventing startup.

    Returns:
        True if the connection test succeeded
    """
    logger.info("===== TESTING DATABASE CONNECTION =====")
    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
        logger.info("✅ Initial database connection test successful!")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to connect to database: {e}")
        return False
