from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.deps import get_command_service
from app.commands import CommandError, ParseError
from app.schemas import CommandRequest, CommandResponse
from app.services.commands import CommandService

router = APIRouter()


@router.post("/", response_model=CommandResponse)
def execute_command(payload: CommandRequest, service: CommandService = Depends(get_command_service)) -> CommandResponse:
    try:
        result = service.execute(payload.command_text)
    except (CommandError, ParseError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    return CommandResponse(feedback_to_user=result.feedback_to_user)
