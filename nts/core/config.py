"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
All values are read from environment variables (and an optional ``.env`` file)
prefixed with ``APP_``. Nested sections use a double underscore as delimiter,
for example ``APP_DATABASE__HOST`` maps to ``settings.database.host``.

Settings are immutable once loaded. Code that needs a variation (the test
harness overriding the database name, for instance) derives a copy with
``model_copy(update=...)``.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from nts.core.errors import ConfigurationError
from nts.domain.subscriber_email import SubscriberEmail

# =====================================================================
# Section Models
# =====================================================================


class ApplicationSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1", description="Address the HTTP server binds to")
    port: int = Field(default=8000, description="Port the HTTP server binds to")
    base_url: str = Field(default="http://127.0.0.1", description="Externally reachable base URL")

    model_config = ConfigDict(frozen=True)


class DatabaseSettings(BaseModel):
    """PostgreSQL server connection parameters."""

    username: str = Field(default="postgres", description="PostgreSQL user")
    password: SecretStr = Field(default=SecretStr("password"), description="PostgreSQL password")
    host: str = Field(default="127.0.0.1", description="PostgreSQL host address")
    port: int = Field(default=5432, description="PostgreSQL port number")
    database_name: str = Field(default="newsletter", description="Database the service works in")
    require_ssl: bool = Field(default=False, description="Require an encrypted connection")

    model_config = ConfigDict(frozen=True)

    def without_db(self) -> URL:
        """URL selecting no database, i.e. the server's default catalog for the user."""
        password = self.password.get_secret_value()
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.username,
            password=password or None,
            host=self.host,
            port=self.port,
        )

    def with_db(self) -> URL:
        """URL targeting ``database_name``."""
        return self.without_db().set(database=self.database_name)

    def connect_args(self) -> Dict[str, Any]:
        """Driver keyword arguments for ``create_async_engine``."""
        if self.require_ssl:
            return {"ssl": "require"}
        return {}


class EmailClientSettings(BaseModel):
    """Transactional email API configuration."""

    base_url: str = Field(default="http://127.0.0.1:8025", description="Email API base URL")
    sender_email: str = Field(default="newsletter@gmail.com", description="Address emails are sent from")
    authorization_token: SecretStr = Field(
        default=SecretStr("local-development-token"), description="Email API server token"
    )
    timeout_milliseconds: int = Field(default=10_000, description="Per-request timeout")

    model_config = ConfigDict(frozen=True)

    def sender(self) -> SubscriberEmail:
        """Parse the configured sender address.

        Raises:
            ValueError: If ``sender_email`` is not a valid email address.
        """
        return SubscriberEmail.parse(self.sender_email)

    def timeout(self) -> timedelta:
        return timedelta(milliseconds=self.timeout_milliseconds)


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="APP_",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    application: ApplicationSettings = Field(default_factory=ApplicationSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    email_client: EmailClientSettings = Field(default_factory=EmailClientSettings)

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(default="detailed", description="Log format (simple, detailed, json)")

    def with_database_name(self, database_name: str) -> "Settings":
        """Return a copy of these settings pointing at another database."""
        database = self.database.model_copy(update={"database_name": database_name})
        return self.model_copy(update={"database": database})


def get_configuration() -> Settings:
    """
    Load the application settings.

    Returns:
        Settings: A freshly loaded settings instance.

    Raises:
        ConfigurationError: If a value in the environment cannot be validated.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Failed to read configuration: {exc}") from exc
