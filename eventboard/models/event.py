# eventboard/models/event.py
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import relationship
from eventboard.db.base_class import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    event_date = Column(Date, nullable=False, index=True)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=True)
    location = Column(String, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    status = Column(String, nullable=False, default="upcoming")
    organizer_id = Column(Integer, nullable=False, index=True)
    price = Column(Float, nullable=False, default=0.0)
    tickets_sold = Column(Integer, nullable=False, default=0)
    attendees = Column(Integer, nullable=False, default=0)
    max_attendees = Column(Integer, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    registration_deadline = Column(String, nullable=True)
    is_virtual = Column(Boolean, nullable=False, default=False)
    image = Column(String, nullable=True)
    map_embed = Column(String, nullable=True)
    accessibility_info = Column(String, nullable=True)
    safety_guidelines = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    # Sub-resources live and die with their event
    agenda = relationship("Agenda", cascade="all, delete-orphan", order_by="Agenda.id")
    speakers = relationship("Speaker", cascade="all, delete-orphan", order_by="Speaker.id")
    faqs = relationship("Faq", cascade="all, delete-orphan", order_by="Faq.id")
    attachments = relationship(
        "Attachment", cascade="all, delete-orphan", order_by="Attachment.id"
    )
    comments = relationship("Comment", cascade="all, delete-orphan", order_by="Comment.id")
