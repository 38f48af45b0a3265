from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import date, datetime
from enum import Enum


class EventStatus(str, Enum):
    upcoming = "upcoming"
    canceled = "canceled"
    complete = "complete"


class EventBase(BaseModel):
    title: str = Field(..., json_schema_extra={"example": "Spring Tech Meetup"})
    description: Optional[str] = None
    event_date: date = Field(..., json_schema_extra={"example": "2025-03-14"})
    start_time: str = Field(..., json_schema_extra={"example": "18:00"})
    end_time: Optional[str] = Field(None, json_schema_extra={"example": "21:00"})
    location: Optional[str] = None
    category_id: Optional[int] = None
    # Free text; the analytics only look at "upcoming", "canceled" and "complete".
    status: str = Field(EventStatus.upcoming.value, json_schema_extra={"example": "upcoming"})
    price: float = Field(0.0, ge=0)
    tickets_sold: int = Field(0, ge=0)
    attendees: int = Field(0, ge=0)
    max_attendees: Optional[int] = Field(None, ge=0)
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    registration_deadline: Optional[str] = None
    is_virtual: bool = False
    image: Optional[str] = None
    map_embed: Optional[str] = None
    accessibility_info: Optional[str] = None
    safety_guidelines: Optional[str] = None

    @model_validator(mode="after")
    def check_attendance_within_sales(self):
        # No-shows are tickets_sold - attendees and must not go negative.
        if self.attendees > self.tickets_sold:
            raise ValueError("attendees cannot exceed tickets_sold")
        return self


class EventCreate(EventBase):
    pass


class EventUpdate(EventBase):
    """PUT body: the full row. Fields left out fall back to their defaults."""
    pass


class Event(EventBase):
    id: int
    organizer_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
