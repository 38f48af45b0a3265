# eventboard/api/v1/endpoints/organizer.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eventboard.api import deps
from eventboard.core.exceptions import ConflictError
from eventboard.crud import crud_organizer
from eventboard.db.session import get_db
from eventboard.models.session import Session as SessionModel
from eventboard.schemas.organizer import Organizer, OrganizerData

router = APIRouter(prefix="/organizer", tags=["Organizer"])


@router.get("", response_model=Organizer)
def get_organizer(
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_organizer.organizer.get_or_404(db, id=current_session.user_id)


@router.post("", response_model=Organizer, status_code=status.HTTP_201_CREATED)
def register_organizer(
    organizer_in: OrganizerData,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Creates the caller's organizer profile. A user has at most one.
    """
    if crud_organizer.organizer.get(db, id=current_session.user_id):
        raise ConflictError("Organizer profile already exists")
    return crud_organizer.organizer.create_for_user(
        db, obj_in=organizer_in, user_id=current_session.user_id
    )


@router.put("", response_model=Organizer)
def put_organizer(
    organizer_in: OrganizerData,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_organizer.organizer.replace(
        db, obj_in=organizer_in, user_id=current_session.user_id
    )
