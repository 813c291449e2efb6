from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from app.domain.index import Index


@dataclass(frozen=True, slots=True)
class Attendee:
    """Participant of a meeting, identified by name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Attendee name must not be blank")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Meeting:
    """Immutable calendar meeting with an ordered, duplicate-free attendee list.

    Edits never touch an existing instance; callers build a new ``Meeting`` and
    swap it into the owning collection.
    """

    title: str
    location: str
    start: datetime
    end: datetime
    attendees: tuple[Attendee, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Meeting title must not be blank")
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise ValueError("Meeting start and end must both be timezone-aware or both naive")
        if self.end < self.start:
            raise ValueError("Meeting end must not be before its start")
        attendees = tuple(self.attendees)
        if len(set(attendees)) != len(attendees):
            raise ValueError("Meeting attendees must be unique")
        # frozen dataclass: normalise lists passed by callers into a tuple
        object.__setattr__(self, "attendees", attendees)

    def get_attendee(self, index: Index) -> Attendee:
        return self.attendees[index.zero_based]

    def with_attendees(self, attendees: Iterable[Attendee]) -> Meeting:
        return Meeting(
            title=self.title,
            location=self.location,
            start=self.start,
            end=self.end,
            attendees=tuple(attendees),
        )

    def is_same_meeting(self, other: Meeting) -> bool:
        """Weaker notion of equality used to detect duplicate entries."""

        return self.title == other.title and self.start == other.start and self.end == other.end


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC; naive values are taken to be UTC already."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
