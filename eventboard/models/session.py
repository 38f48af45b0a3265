# eventboard/models/session.py
from sqlalchemy import Column, Integer, String, ForeignKey
from eventboard.db.base_class import Base


class Session(Base):
    """A login session. Valid until deleted; there is no expiry column."""

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    token = Column(String, nullable=False, unique=True, index=True)
