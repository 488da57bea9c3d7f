"""
Database package - async SQLAlchemy engine and sessions
"""

from .async_db import (
    dispose_async_engine,
    get_async_db,
    get_async_db_context,
    get_async_engine,
    get_session_factory,
)

__all__ = [
    "dispose_async_engine",
    "get_async_db",
    "get_async_db_context",
    "get_async_engine",
    "get_session_factory",
]
