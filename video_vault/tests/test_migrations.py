"""
Tests for the soft-delete column migration against legacy schemas.
"""

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.pool import StaticPool

from video_vault.migrations import add_soft_delete_columns


@pytest.fixture
def legacy_engine(monkeypatch):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE folders (id CHAR(32) PRIMARY KEY, name VARCHAR(100) NOT NULL)"))
        conn.execute(text(
            "CREATE TABLE folder_permissions (id CHAR(32) PRIMARY KEY, folder_id CHAR(32) NOT NULL)"
        ))
        conn.execute(text("INSERT INTO folders (id, name) VALUES ('a', 'Legacy')"))
    monkeypatch.setattr(add_soft_delete_columns, "engine", engine)
    yield engine
    engine.dispose()


def _columns(engine, table):
    return {col["name"] for col in inspect(engine).get_columns(table)}


def test_adds_deleted_at_to_both_tables(legacy_engine):
    add_soft_delete_columns.migrate()
    assert "deleted_at" in _columns(legacy_engine, "folders")
    assert "deleted_at" in _columns(legacy_engine, "folder_permissions")


def test_existing_rows_stay_active(legacy_engine):
    add_soft_delete_columns.migrate()
    with legacy_engine.connect() as conn:
        deleted_at = conn.execute(text("SELECT deleted_at FROM folders WHERE id = 'a'")).scalar()
    assert deleted_at is None


def test_running_twice_is_harmless(legacy_engine):
    add_soft_delete_columns.migrate()
    add_soft_delete_columns.migrate()
    assert "deleted_at" in _columns(legacy_engine, "folders")


def test_missing_tables_are_skipped(monkeypatch):
    engine = create_engine("sqlite://", poolclass=StaticPool)
    monkeypatch.setattr(add_soft_delete_columns, "engine", engine)
    add_soft_delete_columns.migrate()
    assert inspect(engine).get_table_names() == []
