from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Callable, Generator, Sequence
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"
TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="meeting-book-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_DIR / 'meetings_test.db'}"

from app.db.initializer import create_database_schema  # noqa: E402
from app.db.session import SessionLocal, engine  # noqa: E402
from app.domain import Attendee, Meeting  # noqa: E402
from app.main import create_app  # noqa: E402

MEETING_DAY = datetime(2025, 1, 6, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def create_test_database() -> Generator[None, None, None]:
    create_database_schema()
    try:
        yield
    finally:
        engine.dispose()
        shutil.rmtree(TEST_DB_DIR, ignore_errors=True)


@pytest.fixture()
def clean_database() -> Generator[None, None, None]:
    _truncate()
    try:
        yield
    finally:
        _truncate()


@pytest.fixture()
def session_scope(clean_database) -> Generator:
    session = SessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def client(clean_database) -> Generator[TestClient, None, None]:
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def meeting_factory() -> Callable[..., Meeting]:
    def build(
        title: str = "Standup",
        attendees: Sequence[str] = ("Alice", "Bob"),
        *,
        location: str = "Room 1",
        hour: int = 9,
        day_offset: int = 0,
    ) -> Meeting:
        start = MEETING_DAY + timedelta(days=day_offset, hours=hour)
        return Meeting(
            title=title,
            location=location,
            start=start,
            end=start + timedelta(hours=1),
            attendees=tuple(Attendee(name=name) for name in attendees),
        )

    return build


def _truncate() -> None:
    with SessionLocal() as session:
        session.execute(text("DELETE FROM meeting_attendees"))
        session.execute(text("DELETE FROM meetings"))
        session.commit()
