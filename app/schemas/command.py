from __future__ import annotations

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    command_text: str = Field(min_length=1, examples=["rmmc 1 1"])


class CommandResponse(BaseModel):
    feedback_to_user: str
