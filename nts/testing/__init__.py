"""
End-to-end testing support.

Typical use from an async test::

    app = await spawn_app()
    try:
        response = await app.health_check()
        assert response.status_code == 200
    finally:
        await app.teardown_database()
"""

from .errors import (
    HarnessError,
    MigrationError,
    MigrationLoadError,
    ProvisioningError,
    SetupError,
    TeardownError,
)
from .harness import TestApp, configure_database, init_test_logging, spawn_app
from .migrations import MigrationScript, apply_migrations, load_migrations
from .provisioning import database_exists, drop_database, provision_database, quote_database_name

__all__ = [
    "HarnessError",
    "MigrationError",
    "MigrationLoadError",
    "MigrationScript",
    "ProvisioningError",
    "SetupError",
    "TeardownError",
    "TestApp",
    "apply_migrations",
    "configure_database",
    "database_exists",
    "drop_database",
    "init_test_logging",
    "load_migrations",
    "provision_database",
    "quote_database_name",
    "spawn_app",
]
