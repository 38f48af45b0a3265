# eventboard/models/user.py
from sqlalchemy import Column, Integer, String
from eventboard.db.base_class import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False, unique=True, index=True)
    # Argon2 PHC string, never the plaintext
    password = Column(String, nullable=False)
