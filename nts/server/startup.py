"""
Server startup.

The service is served by uvicorn on a socket that is bound *before* the server
is created. Binding first lets callers ask the OS for a free port (port ``0``)
and learn the port number before anything is served, which is what the test
harness relies on.
"""

from __future__ import annotations

import socket

import uvicorn
from sqlalchemy.ext.asyncio import AsyncEngine

from nts.core.config import Settings
from nts.core.database import get_connection_pool
from nts.core.logging_config import get_logger
from nts.email_client import EmailClient

from .main import create_app

logger = get_logger(__name__)


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``; port ``0`` lets the OS pick a free port.

    Raises:
        OSError: If the address cannot be bound.
    """
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen()
    except OSError:
        listener.close()
        raise
    return listener


class Server:
    """A uvicorn server serving the application on a pre-bound listener.

    ``serve()`` is the runnable unit. ``started`` turns true once the server
    accepts connections and ``request_shutdown()`` asks ``serve()`` to return.
    """

    def __init__(self, listener: socket.socket, config: uvicorn.Config) -> None:
        self.listener = listener
        self._server = uvicorn.Server(config)

    @property
    def port(self) -> int:
        return self.listener.getsockname()[1]

    @property
    def started(self) -> bool:
        return self._server.started

    async def serve(self) -> None:
        await self._server.serve(sockets=[self.listener])

    def request_shutdown(self) -> None:
        self._server.should_exit = True


def run(listener: socket.socket, db_pool: AsyncEngine, email_client: EmailClient) -> Server:
    """
    Create the server for ``listener``.

    Raises:
        OSError: If ``listener`` is not a bound socket.
    """
    # getsockname() on a closed socket raises, surfacing the bind-time failure here
    host, port = listener.getsockname()[:2]
    app = create_app(db_pool, email_client)
    config = uvicorn.Config(app, log_config=None, access_log=False, lifespan="on")
    logger.debug("Server created for %s:%s", host, port)
    return Server(listener, config)


class Application:
    """The production service: server plus the resources it owns."""

    def __init__(self, server: Server, db_pool: AsyncEngine, email_client: EmailClient) -> None:
        self.server = server
        self.db_pool = db_pool
        self.email_client = email_client

    @classmethod
    def build(cls, settings: Settings) -> Application:
        listener = bind_listener(settings.application.host, settings.application.port)
        db_pool = get_connection_pool(settings.database)
        email_client = EmailClient(
            settings.email_client.base_url,
            settings.email_client.sender(),
            settings.email_client.authorization_token,
            settings.email_client.timeout(),
        )
        return cls(run(listener, db_pool, email_client), db_pool, email_client)

    @property
    def port(self) -> int:
        return self.server.port

    async def run_until_stopped(self) -> None:
        logger.info("Listening on port %s", self.port)
        try:
            await self.server.serve()
        finally:
            await self.db_pool.dispose()
            await self.email_client.aclose()
