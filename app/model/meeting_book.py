from __future__ import annotations

import logging
from typing import Callable, Iterable

from app.domain import Meeting

logger = logging.getLogger(__name__)

MeetingPredicate = Callable[[Meeting], bool]


def _show_all(meeting: Meeting) -> bool:
    return True


PREDICATE_SHOW_ALL_MEETINGS: MeetingPredicate = _show_all


class MeetingNotFoundError(LookupError):
    """Raised when a meeting to replace is not part of the book."""


class DuplicateMeetingError(ValueError):
    """Raised when adding a meeting that is already in the book."""


class MeetingBook:
    """In-memory meeting store with a filtered view used for index lookups."""

    def __init__(self, meetings: Iterable[Meeting] = ()) -> None:
        self._meetings: list[Meeting] = list(meetings)
        self._predicate: MeetingPredicate = PREDICATE_SHOW_ALL_MEETINGS

    @property
    def meetings(self) -> tuple[Meeting, ...]:
        return tuple(self._meetings)

    def reset_data(self, meetings: Iterable[Meeting]) -> None:
        self._meetings = list(meetings)

    def has_meeting(self, meeting: Meeting) -> bool:
        return any(existing.is_same_meeting(meeting) for existing in self._meetings)

    def add_meeting(self, meeting: Meeting) -> None:
        if self.has_meeting(meeting):
            raise DuplicateMeetingError(f"This meeting already exists in the meeting book: {meeting.title}")
        self._meetings.append(meeting)
        self._predicate = PREDICATE_SHOW_ALL_MEETINGS

    def set_meeting(self, target: Meeting, edited: Meeting) -> None:
        """Replace ``target`` (matched by identity) with ``edited``."""

        for position, meeting in enumerate(self._meetings):
            if meeting is target:
                self._meetings[position] = edited
                logger.debug("Replaced meeting at position %d: %s", position, edited.title)
                return
        raise MeetingNotFoundError(f"Meeting not found: {target.title}")

    def get_filtered_meeting_list(self) -> tuple[Meeting, ...]:
        return tuple(meeting for meeting in self._meetings if self._predicate(meeting))

    @property
    def filter_predicate(self) -> MeetingPredicate:
        return self._predicate

    def update_filtered_meeting_list(self, predicate: MeetingPredicate) -> None:
        self._predicate = predicate
