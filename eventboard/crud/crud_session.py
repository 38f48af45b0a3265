# eventboard/crud/crud_session.py
import logging
from sqlalchemy.orm import Session

from eventboard.core.exceptions import NotFoundError
from eventboard.db.session import storage_errors
from eventboard.models.session import Session as SessionModel

logger = logging.getLogger(__name__)


class CRUDSession:
    """
    Login sessions keyed by token. There is no TTL: a session lives until
    logout or until its user is deleted.
    """

    def create_session(self, db: Session, *, user_id: int, token: str) -> SessionModel:
        db_obj = SessionModel(user_id=user_id, token=token)
        with storage_errors(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        logger.info(f"Session created for user {user_id}")
        return db_obj

    def get_session_by_token(self, db: Session, *, token: str) -> SessionModel:
        with storage_errors(db):
            db_obj = db.query(SessionModel).filter(SessionModel.token == token).first()
        if not db_obj:
            raise NotFoundError("Session")
        return db_obj

    def delete_session(self, db: Session, *, token: str) -> None:
        with storage_errors(db):
            db.query(SessionModel).filter(SessionModel.token == token).delete()
            db.commit()
        logger.info("Session deleted")

    def delete_sessions_for_user(self, db: Session, *, user_id: int) -> int:
        with storage_errors(db):
            deleted = (
                db.query(SessionModel).filter(SessionModel.user_id == user_id).delete()
            )
            db.commit()
        logger.info(f"Deleted {deleted} session(s) for user {user_id}")
        return deleted


session = CRUDSession()
