from __future__ import annotations

from fastapi import Request

from app.services.commands import CommandService


def get_command_service(request: Request) -> CommandService:
    """FastAPI dependency returning the process-wide command service."""

    return request.app.state.command_service
