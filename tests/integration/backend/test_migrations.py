"""
Integration Tests for Alembic Migrations.

Runs the revision chain against a temporary SQLite file and compares the
resulting schema with the ORM models.
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from webcalendar.backend.core.config import get_app_config, get_settings
from webcalendar.backend.models import Base

MIGRATIONS_DIR = (
    Path(__file__).resolve().parents[3] / "webcalendar" / "backend" / "migrations"
)


@pytest.fixture
def database_file(tmp_path, monkeypatch) -> Path:
    """Point DATABASE_URL at a fresh SQLite file for env.py to pick up."""
    path = tmp_path / "calendar.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    get_settings.cache_clear()
    get_app_config.cache_clear()
    return path


@pytest.fixture
def alembic_config() -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    return config


def _inspect(path: Path):
    engine = create_engine(f"sqlite:///{path}")
    return engine, inspect(engine)


class TestUpgrade:
    """Tests for upgrading to head."""

    def test_creates_tables_and_indexes(self, alembic_config, database_file):
        command.upgrade(alembic_config, "head")

        engine, inspector = _inspect(database_file)
        try:
            assert {"users", "notes"} <= set(inspector.get_table_names())

            user_indexes = {i["name"]: i for i in inspector.get_indexes("users")}
            assert bool(user_indexes["ix_users_email"]["unique"]) is True

            note_indexes = {i["name"] for i in inspector.get_indexes("notes")}
            assert {"ix_notes_user_id", "ix_notes_user_id_date"} <= note_indexes

            checks = {c["name"] for c in inspector.get_check_constraints("notes")}
            assert "ck_notes_content_length" in checks

            (fk,) = inspector.get_foreign_keys("notes")
            assert fk["referred_table"] == "users"
            assert fk["options"].get("ondelete") == "CASCADE"
        finally:
            engine.dispose()

    def test_schema_matches_models(self, alembic_config, database_file):
        command.upgrade(alembic_config, "head")

        engine, inspector = _inspect(database_file)
        try:
            for table in Base.metadata.sorted_tables:
                reflected_columns = {c["name"] for c in inspector.get_columns(table.name)}
                assert reflected_columns == {c.name for c in table.columns}, table.name

                reflected_indexes = {i["name"] for i in inspector.get_indexes(table.name)}
                assert reflected_indexes == {i.name for i in table.indexes}, table.name
        finally:
            engine.dispose()


class TestDowngrade:
    """Tests for downgrading to base."""

    def test_removes_tables(self, alembic_config, database_file):
        command.upgrade(alembic_config, "head")
        command.downgrade(alembic_config, "base")

        engine, inspector = _inspect(database_file)
        try:
            tables = set(inspector.get_table_names())
            assert "users" not in tables
            assert "notes" not in tables
        finally:
            engine.dispose()
