"""Fixtures for harness tests against a real PostgreSQL server.

The server is either a throwaway container started with testcontainers or,
with ``DATABASE__USE_TESTCONTAINERS=false``, whatever the ``APP_DATABASE__*``
settings point at. All tests here are skipped unless
``DATABASE__ENABLE_POSTGRES_TESTS=true``.
"""

from __future__ import annotations

from test.settings import test_settings
from typing import AsyncGenerator, Generator, Optional

import pytest
from testcontainers.postgres import PostgresContainer

from nts.core.config import DatabaseSettings, Settings, get_configuration
from nts.testing import TestApp, spawn_app


@pytest.fixture(autouse=True)
def _require_postgres():
    if not test_settings.database.enable_postgres_tests:
        pytest.skip("PostgreSQL tests are disabled; set DATABASE__ENABLE_POSTGRES_TESTS=true")


@pytest.fixture(scope="session")
def postgres_container() -> Generator[Optional[PostgresContainer], None, None]:
    """Start a PostgreSQL container for the test session, if configured to."""
    if not (test_settings.database.enable_postgres_tests and test_settings.database.use_testcontainers):
        yield None
        return
    container = PostgresContainer(test_settings.database.postgres_image, driver=None)
    container.start()
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture(scope="session")
def configuration(postgres_container: Optional[PostgresContainer]) -> Settings:
    """Service settings pointing at the PostgreSQL server under test."""
    settings = get_configuration()
    if postgres_container is None:
        return settings
    database = DatabaseSettings(
        username=postgres_container.username,
        password=postgres_container.password,
        host=postgres_container.get_container_host_ip(),
        port=int(postgres_container.get_exposed_port(5432)),
        database_name=postgres_container.dbname,
    )
    return settings.model_copy(update={"database": database})


@pytest.fixture
async def app(configuration: Settings, migrations_dir) -> AsyncGenerator[TestApp, None]:
    """A spawned service; torn down after the test unless the test did it."""
    test_app = await spawn_app(migrations_dir, configuration=configuration)
    yield test_app
    if not test_app.torn_down:
        await test_app.teardown_database()
