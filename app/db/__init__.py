"""
Database connection and session management.

Exports:
    - create_db_engine: SQLAlchemy engine with NullPool (pgBouncer handles pooling)
    - create_session_factory: Session factory bound to an engine
    - get_session_context: Context manager with rollback-on-error and close
    - check_connection: Startup connectivity check (logs, never raises)
"""

from .engine import (
    create_db_engine,
    create_session_factory,
    get_session_context,
    check_connection,
)

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "get_session_context",
    "check_connection",
]
