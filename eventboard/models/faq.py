# eventboard/models/faq.py
from sqlalchemy import Column, ForeignKey, Integer, String
from eventboard.db.base_class import Base


class Faq(Base):
    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    question = Column(String, nullable=False)
    answer = Column(String, nullable=True)
