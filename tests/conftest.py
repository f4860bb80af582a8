"""Pytest configuration and fixtures"""

import pytest

from artist_contracts.db import get_database
from artist_contracts.services.seeder import seed_templates


@pytest.fixture(autouse=True)
def test_env(tmp_path, monkeypatch):
    """Set up test environment with temporary database"""
    db_path = tmp_path / "test.db"

    monkeypatch.setenv("DATABASE_PATH", str(db_path))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    yield

    # Cleanup handled by tmp_path fixture


@pytest.fixture
def db():
    """Empty database with schema"""
    database = get_database()
    database.init_db()
    return database


@pytest.fixture
def seeded_db(db):
    """Database holding the built-in templates"""
    seed_templates(db)
    return db


@pytest.fixture
def artist_template(seeded_db):
    return seeded_db.get_template_by_name("Artist Collaboration Agreement")
