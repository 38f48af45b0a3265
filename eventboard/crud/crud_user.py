# eventboard/crud/crud_user.py
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .base import CRUDBase
from eventboard.core.exceptions import ConflictError, NotFoundError
from eventboard.db.session import storage_errors
from eventboard.models.user import User
from eventboard.schemas.auth import AuthData


class CRUDUser(CRUDBase[User, AuthData, AuthData]):

    def get_by_username(self, db: Session, *, username: str) -> Optional[User]:
        with storage_errors(db):
            return db.query(User).filter(User.username == username).first()

    def get_or_404(self, db: Session, *, id: int) -> User:
        user = self.get(db, id=id)
        if not user:
            raise NotFoundError("User")
        return user

    def create_user(self, db: Session, *, username: str, password_hash: str) -> User:
        """
        Stores a new user. ``password_hash`` must already be hashed. A taken
        username raises ConflictError, also when a concurrent request won the race.
        """
        db_obj = User(username=username, password=password_hash)
        with storage_errors(db):
            db.add(db_obj)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise ConflictError(f"Username {username} is already registered")
            db.refresh(db_obj)
        return db_obj

    def update_password(self, db: Session, *, user_id: int, password_hash: str) -> None:
        user = self.get_or_404(db, id=user_id)
        self.update(db, db_obj=user, obj_in={"password": password_hash})


user = CRUDUser(User)
