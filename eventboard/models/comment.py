# eventboard/models/comment.py
from sqlalchemy import Column, ForeignKey, Integer, String
from eventboard.db.base_class import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    message = Column(String, nullable=False)
