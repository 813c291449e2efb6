from __future__ import annotations

import re

from app.commands.base import Command
from app.commands.list_meetings import FindMeetingCommand, ListMeetingCommand, TitleContainsKeywordsPredicate
from app.commands.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_INVALID_INDEX, MESSAGE_UNKNOWN_COMMAND
from app.commands.remove_meeting_contact import RemoveMeetingContactCommand
from app.domain import Index

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)
_UNSIGNED_INTEGER = re.compile(r"\d+")


class ParseError(Exception):
    """Raised when user input does not conform to the expected format."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_index(text: str) -> Index:
    """Parse a one-based index; leading and trailing whitespace is ignored."""

    trimmed = text.strip()
    if not _UNSIGNED_INTEGER.fullmatch(trimmed) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_remove_meeting_contact(arguments: str) -> RemoveMeetingContactCommand:
    tokens = arguments.split()
    if len(tokens) != 2:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % RemoveMeetingContactCommand.MESSAGE_USAGE)
    try:
        meeting_index = parse_index(tokens[0])
        attendee_index = parse_index(tokens[1])
    except ParseError as exc:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % RemoveMeetingContactCommand.MESSAGE_USAGE) from exc
    return RemoveMeetingContactCommand(meeting_index, attendee_index)


def parse_find_meeting(arguments: str) -> FindMeetingCommand:
    keywords = arguments.split()
    if not keywords:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT % FindMeetingCommand.MESSAGE_USAGE)
    return FindMeetingCommand(TitleContainsKeywordsPredicate(keywords))


def parse_command(user_input: str) -> Command:
    """Turn a line of user input into a command ready for execution."""

    matcher = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if matcher is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)

    command_word = matcher.group("command_word")
    arguments = matcher.group("arguments")

    if command_word == RemoveMeetingContactCommand.COMMAND_WORD:
        return parse_remove_meeting_contact(arguments)
    if command_word == FindMeetingCommand.COMMAND_WORD:
        return parse_find_meeting(arguments)
    if command_word == ListMeetingCommand.COMMAND_WORD:
        return ListMeetingCommand()
    raise ParseError(MESSAGE_UNKNOWN_COMMAND)
