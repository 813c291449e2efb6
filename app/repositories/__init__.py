"""Data access layer repositories."""

from . import meetings

__all__ = [
    "meetings",
]
