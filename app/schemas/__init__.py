from .command import CommandRequest, CommandResponse
from .meeting import MeetingCollection, MeetingCreate, MeetingRead

__all__ = [
    "CommandRequest",
    "CommandResponse",
    "MeetingCollection",
    "MeetingCreate",
    "MeetingRead",
]
