# eventboard/schemas/event_details.py
"""Sub-resources shown on an event's detail page, and the page aggregate."""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from eventboard.schemas.event import Event
from eventboard.schemas.organizer import Organizer


# Each "In" schema is one item of a bulk PUT: with an id it replaces that row,
# without one it is inserted.

class AgendaBase(BaseModel):
    start_time: datetime
    title: str
    speaker: str


class AgendaIn(AgendaBase):
    id: Optional[int] = None


class Agenda(AgendaBase):
    id: int
    event_id: int

    model_config = {"from_attributes": True}


class SpeakerBase(BaseModel):
    name: str
    bio: Optional[str] = None
    photo: Optional[str] = None


class SpeakerIn(SpeakerBase):
    id: Optional[int] = None


class Speaker(SpeakerBase):
    id: int
    event_id: int

    model_config = {"from_attributes": True}


class FaqBase(BaseModel):
    question: str
    answer: Optional[str] = None


class FaqIn(FaqBase):
    id: Optional[int] = None


class Faq(FaqBase):
    id: int
    event_id: int

    model_config = {"from_attributes": True}


class AttachmentBase(BaseModel):
    name: str
    url: str


class AttachmentIn(AttachmentBase):
    id: Optional[int] = None


class Attachment(AttachmentBase):
    id: int
    event_id: int

    model_config = {"from_attributes": True}


class CommentBase(BaseModel):
    message: str


class CommentIn(CommentBase):
    id: Optional[int] = None


class Comment(CommentBase):
    id: int
    event_id: int

    model_config = {"from_attributes": True}


class EventDetails(BaseModel):
    organizer: Optional[Organizer] = None
    agenda: List[Agenda] = []
    speakers: List[Speaker] = []
    faqs: List[Faq] = []
    attachments: List[Attachment] = []
    comments: List[Comment] = []
    related_events: List[Event] = []


class EventDetailsUpdate(BaseModel):
    agenda: List[AgendaIn] = []
    speakers: List[SpeakerIn] = []
    faqs: List[FaqIn] = []
    attachments: List[AttachmentIn] = []
    comments: List[CommentIn] = []
