from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from app.domain import Attendee, Meeting, as_utc


class MeetingBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    location: str = Field(default="", max_length=255)
    start_time: datetime
    end_time: datetime
    attendees: list[str] = Field(default_factory=list)


class MeetingCreate(MeetingBase):
    @field_validator("start_time", "end_time")
    @classmethod
    def normalise_timezone(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def check_meeting(self) -> MeetingCreate:
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        if len(set(self.attendees)) != len(self.attendees):
            raise ValueError("attendees must be unique")
        return self

    def to_domain(self) -> Meeting:
        return Meeting(
            title=self.title,
            location=self.location,
            start=self.start_time,
            end=self.end_time,
            attendees=tuple(Attendee(name=name) for name in self.attendees),
        )


class MeetingRead(MeetingBase):
    index: int = Field(ge=1, description="One-based position in the displayed list")

    @classmethod
    def from_domain(cls, index: int, meeting: Meeting) -> MeetingRead:
        return cls(
            index=index,
            title=meeting.title,
            location=meeting.location,
            start_time=meeting.start,
            end_time=meeting.end,
            attendees=[attendee.name for attendee in meeting.attendees],
        )


class MeetingCollection(BaseModel):
    items: list[MeetingRead]
