from .index import Index
from .meeting import Attendee, Meeting, as_utc

__all__ = [
    "Attendee",
    "Index",
    "Meeting",
    "as_utc",
]
