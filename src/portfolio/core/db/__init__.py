"""Database utilities - engine and session."""

from src.portfolio.core.db.engine import (
    create_engine_from_settings,
    dispose_engine,
    get_engine,
    to_async_url,
)
from src.portfolio.core.db.session import SessionFactory, get_session, session_factory_for

__all__ = [
    # Engine
    "create_engine_from_settings",
    "dispose_engine",
    "get_engine",
    "to_async_url",
    # Session
    "SessionFactory",
    "get_session",
    "session_factory_for",
]
