from datetime import timedelta
from pathlib import Path
from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from nts.domain import SubscriberEmail
from nts.email_client import EmailClient
from nts.server.main import create_app

SUBSCRIPTIONS_TABLE = (
    "CREATE TABLE subscriptions ("
    "id TEXT PRIMARY KEY, email TEXT NOT NULL UNIQUE, name TEXT NOT NULL, "
    "subscribed_at TEXT NOT NULL, status TEXT NOT NULL)"
)


@pytest_asyncio.fixture
async def db_pool(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """SQLite engine with the subscriptions table already created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'server.db'}")
    async with engine.begin() as conn:
        await conn.execute(text(SUBSCRIPTIONS_TABLE))
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def email_client() -> AsyncGenerator[EmailClient, None]:
    client = EmailClient(
        "http://127.0.0.1:1",
        SubscriberEmail.parse("newsletter@gmail.com"),
        SecretStr("token"),
        timedelta(seconds=1),
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def client(db_pool: AsyncEngine, email_client: EmailClient) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the application in-process."""
    app = create_app(db_pool, email_client)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as ac:
        yield ac


@pytest_asyncio.fixture
async def broken_client(email_client: EmailClient) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose database pool fails on every connection."""
    pool = MagicMock()
    pool.begin.side_effect = OperationalError("INSERT", {}, Exception("connection refused"))
    app = create_app(pool, email_client)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as ac:
        yield ac
