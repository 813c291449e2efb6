from __future__ import annotations

import pytest

from app.commands import FindMeetingCommand, ListMeetingCommand, TitleContainsKeywordsPredicate
from app.model import PREDICATE_SHOW_ALL_MEETINGS, DuplicateMeetingError, MeetingBook, MeetingNotFoundError


def test_set_meeting_replaces_by_identity(meeting_factory) -> None:
    original = meeting_factory("Standup")
    lookalike = meeting_factory("Standup")
    book = MeetingBook([original, lookalike])
    edited = original.with_attendees([])

    book.set_meeting(lookalike, edited)

    assert book.meetings[0] is original
    assert book.meetings[1] is edited


def test_set_meeting_requires_target_present(meeting_factory) -> None:
    stored = meeting_factory("Standup")
    book = MeetingBook([stored])

    with pytest.raises(MeetingNotFoundError):
        book.set_meeting(meeting_factory("Standup"), stored.with_attendees([]))


def test_add_meeting_rejects_same_meeting(meeting_factory) -> None:
    book = MeetingBook()
    book.add_meeting(meeting_factory("Standup"))

    with pytest.raises(DuplicateMeetingError):
        book.add_meeting(meeting_factory("Standup", ["Carl"]))
    book.add_meeting(meeting_factory("Standup", day_offset=1))

    assert len(book.meetings) == 2


def test_filtered_list_follows_predicate(meeting_factory) -> None:
    standup = meeting_factory("Daily standup")
    review = meeting_factory("Design review", day_offset=1)
    book = MeetingBook([standup, review])

    book.update_filtered_meeting_list(TitleContainsKeywordsPredicate(["REVIEW"]))
    assert book.get_filtered_meeting_list() == (review,)

    book.update_filtered_meeting_list(PREDICATE_SHOW_ALL_MEETINGS)
    assert book.get_filtered_meeting_list() == (standup, review)


def test_find_and_list_commands_update_view(meeting_factory) -> None:
    book = MeetingBook([meeting_factory("Daily standup"), meeting_factory("Design review", day_offset=1)])

    result = FindMeetingCommand(TitleContainsKeywordsPredicate(["standup", "retro"])).execute(book)
    assert result.feedback_to_user == "1 meetings listed!"
    assert len(book.get_filtered_meeting_list()) == 1

    result = ListMeetingCommand().execute(book)
    assert result.feedback_to_user == "Listed all meetings"
    assert len(book.get_filtered_meeting_list()) == 2


def test_reset_data_replaces_contents(meeting_factory) -> None:
    book = MeetingBook([meeting_factory("Standup")])
    book.reset_data([])

    assert book.meetings == ()
