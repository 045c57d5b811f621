from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = TEST_ROOT.parent

# Load test/.env first, then fall back to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# Import test settings after dotenv is loaded
from test.settings import test_settings  # noqa: E402


@pytest.fixture(scope="session")
def test_config():
    """Fixture providing test configuration from Pydantic settings model.

    Returns:
        TestSettings: Test configuration with all environment variables loaded
    """
    return test_settings


@pytest.fixture(scope="session")
def migrations_dir() -> Path:
    """The SQL migration scripts shipped with the project."""
    return PROJECT_ROOT / "migrations"


@pytest.fixture
def write_migrations(tmp_path: Path):
    """Write ``{file_name: sql}`` into a fresh directory and return its path."""

    def _write(scripts: dict[str, str]) -> Path:
        directory = tmp_path / "migrations"
        directory.mkdir(exist_ok=True)
        for name, sql in scripts.items():
            (directory / name).write_text(sql, encoding="utf-8")
        return directory

    return _write
