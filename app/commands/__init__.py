from .base import Command, CommandError, CommandResult
from .list_meetings import FindMeetingCommand, ListMeetingCommand, TitleContainsKeywordsPredicate
from .parser import ParseError, parse_command, parse_index
from .remove_meeting_contact import RemoveMeetingContactCommand, update_meeting_attendees

__all__ = [
    "Command",
    "CommandError",
    "CommandResult",
    "FindMeetingCommand",
    "ListMeetingCommand",
    "ParseError",
    "RemoveMeetingContactCommand",
    "TitleContainsKeywordsPredicate",
    "parse_command",
    "parse_index",
    "update_meeting_attendees",
]
