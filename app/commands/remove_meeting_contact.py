from __future__ import annotations

import logging
from typing import Iterable

from app.commands.base import Command, CommandError, CommandResult
from app.commands.messages import MESSAGE_INVALID_ATTENDEE_INDEX, MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
from app.domain import Attendee, Index, Meeting
from app.model import MeetingBook

logger = logging.getLogger(__name__)


class RemoveMeetingContactCommand(Command):
    """Removes an attendee from a meeting, both addressed by displayed position."""

    COMMAND_WORD = "rmmc"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Removes the attendee indicated by the attendee index in the attendees list "
        "of the meeting indicated by the meeting index.\n"
        "Parameters: MEETING_INDEX ATTENDEE_INDEX \n"
        f"Example: {COMMAND_WORD} 1 1"
    )

    MESSAGE_REMOVE_MEETING_CONTACT_SUCCESS = "Removed Person ({}) from Meeting ({})"

    def __init__(self, meeting_index: Index, attendee_index: Index) -> None:
        self.meeting_index = meeting_index
        self.attendee_index = attendee_index

    def execute(self, model: MeetingBook) -> CommandResult:
        last_shown_list = model.get_filtered_meeting_list()
        if self.meeting_index.zero_based >= len(last_shown_list):
            raise CommandError(MESSAGE_INVALID_MEETING_DISPLAYED_INDEX)
        meeting = last_shown_list[self.meeting_index.zero_based]

        attendees = meeting.attendees
        if self.attendee_index.zero_based >= len(attendees):
            raise CommandError(MESSAGE_INVALID_ATTENDEE_INDEX)
        attendee_to_remove = meeting.get_attendee(self.attendee_index)

        updated_attendees = [attendee for attendee in attendees if attendee != attendee_to_remove]
        updated_meeting = update_meeting_attendees(meeting, updated_attendees)
        model.set_meeting(meeting, updated_meeting)

        logger.info("Removed attendee %s from meeting %s", attendee_to_remove.name, meeting.title)
        return CommandResult(
            self.MESSAGE_REMOVE_MEETING_CONTACT_SUCCESS.format(attendee_to_remove.name, meeting.title)
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, RemoveMeetingContactCommand):
            return NotImplemented
        return self.meeting_index == other.meeting_index and self.attendee_index == other.attendee_index

    def __hash__(self) -> int:
        return hash((self.meeting_index, self.attendee_index))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(meeting_index={self.meeting_index!r}, "
            f"attendee_index={self.attendee_index!r})"
        )


def update_meeting_attendees(meeting: Meeting, attendees: Iterable[Attendee]) -> Meeting:
    """Return ``meeting`` with ``attendees``, reusing the instance when membership is unchanged."""

    attendees = tuple(attendees)
    if set(attendees) == set(meeting.attendees):
        return meeting
    return meeting.with_attendees(attendees)
