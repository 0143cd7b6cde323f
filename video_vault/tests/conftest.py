"""
Shared fixtures for the Video Vault test suite.

Every test gets its own in-memory SQLite database. The application engine
is pointed at an in-memory database too, so startup never touches a file.
"""

import os

os.environ["VIDEO_VAULT_DATABASE_URL"] = "sqlite://"

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from video_vault.config import settings
from video_vault.database import Base, get_db
from video_vault.main import app
from video_vault.models import Folder, User, UserRole, Video
from video_vault.services.caller import CallerContext


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key constraints for SQLite connections."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def new_test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _set_sqlite_pragma)
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def engine():
    engine = new_test_engine()
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Create a fresh database session for each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """Test client whose requests share the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def create_user(db, role=UserRole.USER, email=None, is_active=True) -> User:
    """Helper to create a user in the database."""
    user = User(
        email=email or f"{uuid.uuid4().hex[:10]}@example.com",
        first_name="Test",
        last_name=role.value,
        role=role,
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_folder(db, owner, name="Folder", parent=None, display_order=None) -> Folder:
    """Helper to insert a folder row directly."""
    folder = Folder(
        name=name,
        parent_folder_id=parent.id if parent is not None else None,
        display_order=display_order,
        created_by_user_id=owner.id,
    )
    db.add(folder)
    db.commit()
    db.refresh(folder)
    return folder


def create_video(db, owner, folder, title="Video", display_order=None, is_active=True) -> Video:
    """Helper to insert a video row directly."""
    video = Video(
        folder_id=folder.id if folder is not None else None,
        title=title,
        s3_key=f"videos/{uuid.uuid4().hex}.mp4",
        display_order=display_order,
        created_by_user_id=owner.id,
        is_active=is_active,
    )
    db.add(video)
    db.commit()
    db.refresh(video)
    return video


@pytest.fixture
def admin(db) -> User:
    return create_user(db, UserRole.ADMIN)


@pytest.fixture
def global_editor(db) -> User:
    return create_user(db, UserRole.GLOBAL_EDITOR)


@pytest.fixture
def member(db) -> User:
    return create_user(db, UserRole.USER)


@pytest.fixture
def admin_caller(admin) -> CallerContext:
    return CallerContext.from_user(admin)


def auth_headers(user) -> dict:
    return {settings.USER_ID_HEADER: str(user.id)}
