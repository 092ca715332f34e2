from pathlib import Path

import pytest

from plugpipe.adapters.sqlite.migrator import SQLiteMigrator
from plugpipe.settings import Settings, load_settings

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def settings() -> Settings:
    """The shipped pipeline.yaml, validated."""
    return load_settings(PROJECT_ROOT / "pipeline.yaml")


@pytest.fixture
def migrations_dir() -> str:
    # Real migrations: exercises the actual SQL
    return str(PROJECT_ROOT / "migrations")


@pytest.fixture
def db_path(tmp_path: Path, migrations_dir: str) -> str:
    """Fresh SQLite database with all migrations applied."""
    path = str(tmp_path / "plugpipe.db")
    SQLiteMigrator(path, migrations_dir).run_migrations()
    return path
