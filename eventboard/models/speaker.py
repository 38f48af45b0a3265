# eventboard/models/speaker.py
from sqlalchemy import Column, ForeignKey, Integer, String
from eventboard.db.base_class import Base


class Speaker(Base):
    __tablename__ = "speakers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    bio = Column(String, nullable=True)
    photo = Column(String, nullable=True)
