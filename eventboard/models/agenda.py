# eventboard/models/agenda.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from eventboard.db.base_class import Base


class Agenda(Base):
    __tablename__ = "agendas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)
    title = Column(String, nullable=False)
    speaker = Column(String, nullable=False)
