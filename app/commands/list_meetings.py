from __future__ import annotations

from collections.abc import Sequence

from app.commands.base import Command, CommandResult
from app.commands.messages import MESSAGE_MEETINGS_LISTED_OVERVIEW
from app.domain import Meeting
from app.model import PREDICATE_SHOW_ALL_MEETINGS, MeetingBook


class ListMeetingCommand(Command):
    """Shows every meeting in the book."""

    COMMAND_WORD = "listm"
    MESSAGE_SUCCESS = "Listed all meetings"
    mutates_model = False

    def execute(self, model: MeetingBook) -> CommandResult:
        model.update_filtered_meeting_list(PREDICATE_SHOW_ALL_MEETINGS)
        return CommandResult(self.MESSAGE_SUCCESS)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListMeetingCommand)

    def __hash__(self) -> int:
        return hash(self.COMMAND_WORD)


class TitleContainsKeywordsPredicate:
    """Matches meetings whose title contains any keyword as a whole word, ignoring case."""

    def __init__(self, keywords: Sequence[str]) -> None:
        self.keywords = [keyword.lower() for keyword in keywords]

    def __call__(self, meeting: Meeting) -> bool:
        words = meeting.title.lower().split()
        return any(keyword in words for keyword in self.keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TitleContainsKeywordsPredicate):
            return NotImplemented
        return self.keywords == other.keywords

    def __hash__(self) -> int:
        return hash(tuple(self.keywords))


class FindMeetingCommand(Command):
    """Narrows the displayed meetings to titles matching any of the keywords."""

    COMMAND_WORD = "findm"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all meetings whose titles contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} standup review"
    )
    mutates_model = False

    def __init__(self, predicate: TitleContainsKeywordsPredicate) -> None:
        self.predicate = predicate

    def execute(self, model: MeetingBook) -> CommandResult:
        model.update_filtered_meeting_list(self.predicate)
        return CommandResult(MESSAGE_MEETINGS_LISTED_OVERVIEW % len(model.get_filtered_meeting_list()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FindMeetingCommand):
            return NotImplemented
        return self.predicate == other.predicate

    def __hash__(self) -> int:
        return hash(self.predicate)
