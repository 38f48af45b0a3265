# eventboard/models/attachment.py
from sqlalchemy import Column, ForeignKey, Integer, String
from eventboard.db.base_class import Base


class Attachment(Base):
    __tablename__ = "attachments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
