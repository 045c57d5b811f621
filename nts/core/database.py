"""
Database engine helpers.

The service and the test harness both talk to PostgreSQL through a SQLAlchemy
``AsyncEngine``. The engine owns the connection pool, so "closing the pool"
means ``await engine.dispose()``.
"""

from __future__ import annotations

import re
from typing import Any, Union

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from nts.core.config import DatabaseSettings


def create_engine(db_url: Union[str, URL], **kwargs: Any) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    String URLs are normalized so the async driver is used. For example,
    ``postgres://`` and ``postgresql+psycopg://`` are rewritten to
    ``postgresql+asyncpg://``.

    Args:
        db_url: Database connection URL
        **kwargs: Forwarded to ``create_async_engine``

    Returns:
        Configured AsyncEngine instance
    """
    if isinstance(db_url, str):
        db_url = re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)
    return create_async_engine(db_url, **kwargs)


def get_connection_pool(settings: DatabaseSettings) -> AsyncEngine:
    """Pooled engine bound to ``settings.database_name``.

    No connection is opened until the engine is first used.
    """
    return create_engine(settings.with_db(), pool_pre_ping=True, connect_args=settings.connect_args())
