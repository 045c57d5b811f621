"""
Application Factory.

``create_app`` assembles the FastAPI application around an already created
connection pool and email client. The application never creates or disposes
those resources itself; whoever calls ``create_app`` owns them.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from nts import __version__
from nts.core.logging_config import get_logger
from nts.email_client import EmailClient

from .api import health, subscriptions
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

logger = get_logger(__name__)

PROJECT_NAME = "NTS"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.
    """
    logger.info("Starting up %s server...", PROJECT_NAME)
    yield
    logger.info("Shutting down %s server...", PROJECT_NAME)


def create_app(db_pool: AsyncEngine, email_client: EmailClient) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        db_pool: Engine bound to the service database
        email_client: Client used to deliver transactional emails

    Returns:
        The configured application
    """
    app = FastAPI(
        title=PROJECT_NAME,
        description="Newsletter subscription service.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_pool = db_pool
    app.state.email_client = email_client

    app.add_middleware(RequestLoggingMiddleware)
    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(subscriptions.router, tags=["subscriptions"])
    return app
