"""
Core building blocks shared by the server and the test harness.

Modules:
    config: pydantic-settings configuration model.
    database: async SQLAlchemy engine helpers.
    errors: configuration errors.
    logging_config: logging formats and handler installation.
"""
