from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from app.commands import CommandResult, parse_command
from app.domain import Meeting
from app.model import MeetingBook

logger = logging.getLogger(__name__)

MeetingStore = Callable[[Iterable[Meeting]], None]


class CommandService:
    """Parses user input, runs the command on the meeting book and persists changes.

    Commands run one at a time; the lock serializes callers coming from
    concurrent request handlers. A failed save rolls the book back to its
    state before the command ran.
    """

    def __init__(self, book: MeetingBook, store: MeetingStore | None = None) -> None:
        self.book = book
        self._store = store
        self._lock = threading.Lock()

    def execute(self, command_text: str) -> CommandResult:
        logger.info("----------------[USER COMMAND][%s]", command_text)
        command = parse_command(command_text)

        with self._lock, self._rollback_on_error():
            result = command.execute(self.book)
            if command.mutates_model:
                self._save()

        logger.info("Result: %s", result.feedback_to_user)
        return result

    def add_meeting(self, meeting: Meeting) -> int:
        """Add ``meeting`` and return its one-based position in the displayed list."""

        with self._lock, self._rollback_on_error():
            self.book.add_meeting(meeting)
            self._save()
            displayed = self.book.get_filtered_meeting_list()
            position = next(index for index, item in enumerate(displayed, start=1) if item is meeting)
        logger.info("Added meeting %s", meeting.title)
        return position

    def displayed_meetings(self) -> tuple[Meeting, ...]:
        with self._lock:
            return self.book.get_filtered_meeting_list()

    def _save(self) -> None:
        if self._store is not None:
            self._store(self.book.meetings)

    @contextmanager
    def _rollback_on_error(self) -> Iterator[None]:
        meetings = self.book.meetings
        predicate = self.book.filter_predicate
        try:
            yield
        except Exception as exc:
            self.book.reset_data(meetings)
            self.book.update_filtered_meeting_list(predicate)
            logger.debug("Meeting book restored after failure: %s", exc)
            raise
