# eventboard/models/organizer.py
from sqlalchemy import Column, Integer, String
from eventboard.db.base_class import Base


class Organizer(Base):
    __tablename__ = "organizers"

    # Shares its primary key with the owning user (one-to-one).
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    logo = Column(String, nullable=True)
    website = Column(String, nullable=True)
