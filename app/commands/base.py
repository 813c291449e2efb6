from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.model import MeetingBook


class CommandError(Exception):
    """Raised when a command cannot be executed against the current model."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True, slots=True)
class CommandResult:
    feedback_to_user: str


class Command(ABC):
    """A single user action executed against the meeting book."""

    # Commands that only change the displayed view skip persistence.
    mutates_model: bool = True

    @abstractmethod
    def execute(self, model: MeetingBook) -> CommandResult:
        raise NotImplementedError
