# eventboard/api/v1/endpoints/auth.py
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from eventboard.api import deps
from eventboard.core.config import settings
from eventboard.core.exceptions import ConflictError, CredentialError, UnauthenticatedError
from eventboard.core.security import (
    generate_session_token,
    hash_password,
    verify_against_dummy,
    verify_password,
)
from eventboard.crud import crud_organizer, crud_session, crud_user
from eventboard.db.session import get_db
from eventboard.models.session import Session as SessionModel
from eventboard.schemas.auth import AuthData, Message, UpdatePasswordRequest, UserData

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=deps.SESSION_COOKIE_NAME,
        value=token,
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="none",
    )


def _expire_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=deps.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="none",
    )


@router.get("/check_auth_status", response_model=UserData)
def check_auth_status(
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Returns the signed-in user together with their organizer profile, if any.
    """
    user = crud_user.user.get(db, id=current_session.user_id)
    if not user:
        raise UnauthenticatedError("User not found")
    organizer = crud_organizer.organizer.get(db, id=current_session.user_id)
    if not organizer:
        return UserData(username=user.username)
    return UserData(
        username=user.username,
        name=organizer.name,
        logo=organizer.logo,
        website=organizer.website,
    )


@router.post("/login", response_model=Message)
def login_user(auth_in: AuthData, response: Response, db: Session = Depends(get_db)):
    """
    Verifies the credentials, opens a session and sets the session cookie.
    Unknown usernames and wrong passwords get the same answer.
    """
    user = crud_user.user.get_by_username(db, username=auth_in.username)
    if not user:
        verify_against_dummy(auth_in.password)
        logger.info("Login rejected: unknown username")
        raise UnauthenticatedError("Invalid username or password")
    try:
        verify_password(user.password, auth_in.password)
    except CredentialError:
        logger.info(f"Login rejected for user {user.id}")
        raise UnauthenticatedError("Invalid username or password")

    token = generate_session_token()
    crud_session.session.create_session(db, user_id=user.id, token=token)
    _set_session_cookie(response, token)
    return Message(message="Session created")


@router.post("/register", response_model=Message, status_code=status.HTTP_201_CREATED)
def register_user(auth_in: AuthData, db: Session = Depends(get_db)):
    if crud_user.user.get_by_username(db, username=auth_in.username):
        raise ConflictError(f"Username {auth_in.username} is already registered")
    user = crud_user.user.create_user(
        db, username=auth_in.username, password_hash=hash_password(auth_in.password)
    )
    logger.info(f"Registered user {user.id}")
    return Message(message=f"User {user.username} registered")


@router.post("/logout", response_model=Message)
def logout_user(
    response: Response,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    crud_session.session.delete_session(db, token=current_session.token)
    _expire_session_cookie(response)
    return Message(message="Logged out successfully")


@router.put("/update_password", response_model=Message)
def change_password(
    password_in: UpdatePasswordRequest,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    crud_user.user.update_password(
        db,
        user_id=current_session.user_id,
        password_hash=hash_password(password_in.new_password),
    )
    return Message(message="Password updated")


@router.delete("/delete_user", response_model=Message)
def remove_user(
    response: Response,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Deletes the caller's sessions, then the user, then the organizer profile.
    Each step commits on its own.
    """
    user_id = current_session.user_id
    crud_session.session.delete_sessions_for_user(db, user_id=user_id)
    crud_user.user.remove(db, id=user_id)
    crud_organizer.organizer.remove(db, id=user_id)
    _expire_session_cookie(response)
    logger.info(f"Deleted user {user_id}")
    return Message(message="User deleted")
