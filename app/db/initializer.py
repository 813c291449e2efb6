from __future__ import annotations

from app.db import models  # noqa: F401  registers tables on Base.metadata
from app.db.base import Base
from app.db.session import engine


def create_database_schema() -> None:
    """Create core tables if they do not exist."""

    Base.metadata.create_all(bind=engine)


__all__ = ["create_database_schema"]
