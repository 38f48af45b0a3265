# eventboard/api/deps.py
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from eventboard.core.exceptions import NotFoundError, UnauthenticatedError
from eventboard.crud import crud_session
from eventboard.db.session import get_db
from eventboard.models.session import Session as SessionModel

SESSION_COOKIE_NAME = "session_token"

# The session travels only in this cookie; there is no Authorization header
# alternative.
session_cookie = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)


def get_current_session(
    token: Optional[str] = Security(session_cookie),
    db: Session = Depends(get_db),
) -> SessionModel:
    """
    Resolves the request's session. Its ``user_id`` is the organizer scope for
    everything the handler does next.
    """
    if not token:
        raise UnauthenticatedError("No session token found in cookies")
    try:
        return crud_session.session.get_session_by_token(db, token=token)
    except NotFoundError:
        raise UnauthenticatedError("Session not authenticated")
