"""
Request Dependencies.

The database pool and the email client are created outside the application and
attached to ``app.state`` by ``create_app``. These helpers expose them to
endpoints through FastAPI's dependency injection.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from nts.email_client import EmailClient


def get_db_pool(request: Request) -> AsyncEngine:
    return request.app.state.db_pool


def get_email_client(request: Request) -> EmailClient:
    return request.app.state.email_client


DbPoolDep = Annotated[AsyncEngine, Depends(get_db_pool)]
EmailClientDep = Annotated[EmailClient, Depends(get_email_client)]
