from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from app.domain import Attendee, Index, as_utc


def test_index_one_and_zero_based_views() -> None:
    index = Index.from_one_based(1)

    assert index.zero_based == 0
    assert index.one_based == 1
    assert index == Index.from_zero_based(0)


def test_index_is_never_negative() -> None:
    with pytest.raises(ValueError):
        Index.from_zero_based(-1)
    with pytest.raises(ValueError):
        Index.from_one_based(0)


def test_meeting_is_immutable(meeting_factory) -> None:
    meeting = meeting_factory()

    with pytest.raises(FrozenInstanceError):
        meeting.title = "Other"  # type: ignore[misc]


def test_meeting_normalises_attendees_to_tuple(meeting_factory) -> None:
    meeting = meeting_factory()
    rebuilt = meeting.with_attendees([Attendee("Carl")])

    assert rebuilt.attendees == (Attendee("Carl"),)
    assert rebuilt.get_attendee(Index(0)) == Attendee("Carl")


def test_meeting_rejects_duplicate_attendees(meeting_factory) -> None:
    with pytest.raises(ValueError, match="unique"):
        meeting_factory(attendees=["Alice", "Alice"])


def test_meeting_rejects_blank_title_and_inverted_times(meeting_factory) -> None:
    meeting = meeting_factory()

    with pytest.raises(ValueError, match="title"):
        meeting_factory(title="  ")
    with pytest.raises(ValueError, match="end"):
        type(meeting)(
            title=meeting.title,
            location=meeting.location,
            start=meeting.start,
            end=meeting.start - timedelta(minutes=1),
        )


def test_attendee_equality_is_by_value() -> None:
    assert Attendee("Alice") == Attendee("Alice")
    assert Attendee("Alice") != Attendee("Bob")
    with pytest.raises(ValueError):
        Attendee(" ")


def test_meeting_rejects_mixed_timezone_awareness(meeting_factory) -> None:
    meeting = meeting_factory()

    with pytest.raises(ValueError, match="timezone"):
        type(meeting)(
            title=meeting.title,
            location=meeting.location,
            start=meeting.start.replace(tzinfo=None),
            end=meeting.end,
        )


def test_as_utc_treats_naive_values_as_utc() -> None:
    naive = datetime(2025, 1, 6, 9)
    berlin = datetime(2025, 1, 6, 10, tzinfo=timezone(timedelta(hours=1)))

    assert as_utc(naive) == datetime(2025, 1, 6, 9, tzinfo=timezone.utc)
    assert as_utc(berlin) == datetime(2025, 1, 6, 9, tzinfo=timezone.utc)
    assert as_utc(berlin).tzinfo == timezone.utc
