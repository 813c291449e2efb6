from .meeting_book import (
    PREDICATE_SHOW_ALL_MEETINGS,
    DuplicateMeetingError,
    MeetingBook,
    MeetingNotFoundError,
    MeetingPredicate,
)

__all__ = [
    "PREDICATE_SHOW_ALL_MEETINGS",
    "DuplicateMeetingError",
    "MeetingBook",
    "MeetingNotFoundError",
    "MeetingPredicate",
]
