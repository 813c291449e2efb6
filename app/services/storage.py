from __future__ import annotations

import logging
from collections.abc import Iterable

from app.db.session import SessionLocal
from app.domain import Meeting
from app.model import MeetingBook
from app.repositories import meetings as meetings_repo

logger = logging.getLogger(__name__)


def load_meeting_book() -> MeetingBook:
    """Build a meeting book from the database contents."""

    with SessionLocal() as session:
        meetings = meetings_repo.load_meetings(session)
    logger.info("Loaded %d meetings from storage", len(meetings))
    return MeetingBook(meetings)


def store_meetings(meetings: Iterable[Meeting]) -> None:
    with SessionLocal() as session:
        meetings_repo.save_meetings(session, meetings)
        session.commit()
