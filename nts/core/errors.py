from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when the application settings cannot be loaded or are invalid."""
