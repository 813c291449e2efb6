from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from app.db import models
from app.domain import Attendee, Meeting, as_utc


def load_meetings(session: Session) -> list[Meeting]:
    """Read the stored meeting book in display order."""

    statement = (
        select(models.Meeting)
        .options(selectinload(models.Meeting.attendees))
        .order_by(models.Meeting.position)
    )
    return [_to_domain(row) for row in session.scalars(statement)]


def save_meetings(session: Session, meetings: Iterable[Meeting]) -> None:
    """Replace the stored meeting book with ``meetings``."""

    session.execute(delete(models.MeetingAttendee))
    session.execute(delete(models.Meeting))
    for position, meeting in enumerate(meetings):
        session.add(_to_row(meeting, position))
    session.flush()


def _to_domain(row: models.Meeting) -> Meeting:
    return Meeting(
        title=row.title,
        location=row.location,
        start=as_utc(row.start_time),
        end=as_utc(row.end_time),
        attendees=tuple(Attendee(name=attendee.name) for attendee in row.attendees),
    )


def _to_row(meeting: Meeting, position: int) -> models.Meeting:
    return models.Meeting(
        position=position,
        title=meeting.title,
        location=meeting.location,
        start_time=as_utc(meeting.start),
        end_time=as_utc(meeting.end),
        attendees=[
            models.MeetingAttendee(position=attendee_position, name=attendee.name)
            for attendee_position, attendee in enumerate(meeting.attendees)
        ],
    )

