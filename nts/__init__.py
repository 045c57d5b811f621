"""NTS.

A small newsletter service together with the tooling used to run it end to end
against a real PostgreSQL server.

Subpackages
-----------

- ``nts.core``: configuration, logging and database engine helpers.
- ``nts.domain``: validated subscriber types.
- ``nts.server``: the FastAPI application and the uvicorn wiring that serves it.
- ``nts.testing``: the end-to-end harness. Each call to
  ``nts.testing.spawn_app`` creates a uniquely named database, applies the SQL
  scripts from ``migrations/``, starts the service on an OS-assigned loopback
  port and returns a ``TestApp`` handle that drops the database again on
  ``teardown_database()``.
"""

__version__ = "0.1.0"
