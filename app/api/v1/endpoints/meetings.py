from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.deps import get_command_service
from app.model import DuplicateMeetingError
from app.schemas import MeetingCollection, MeetingCreate, MeetingRead
from app.services.commands import CommandService

router = APIRouter()


@router.get("/", response_model=MeetingCollection)
def list_meetings(service: CommandService = Depends(get_command_service)) -> MeetingCollection:
    displayed = service.displayed_meetings()
    items = [MeetingRead.from_domain(index, meeting) for index, meeting in enumerate(displayed, start=1)]
    return MeetingCollection(items=items)


@router.post("/", response_model=MeetingRead, status_code=status.HTTP_201_CREATED)
def create_meeting(payload: MeetingCreate, service: CommandService = Depends(get_command_service)) -> MeetingRead:
    try:
        meeting = payload.to_domain()
        position = service.add_meeting(meeting)
    except DuplicateMeetingError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    return MeetingRead.from_domain(position, meeting)
