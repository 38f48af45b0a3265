# eventboard/api/v1/endpoints/attendees.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from eventboard.api import deps
from eventboard.crud import crud_analytics
from eventboard.db.session import get_db
from eventboard.models.session import Session as SessionModel
from eventboard.schemas.analytics import (
    AttendanceExtremes,
    AttendeeCounts,
    AttendeeTotals,
    NoShowTotals,
)

router = APIRouter(prefix="/attendees", tags=["Attendees"])


@router.get("/counts/monthly", response_model=AttendeeTotals)
def get_monthly_attendees(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_analytics.analytics.get_monthly_attendees(
        db, organizer_id=current_session.user_id, year=year
    )


@router.get("/counts/daily", response_model=AttendeeCounts)
def get_daily_attendee_counts(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_analytics.analytics.get_daily_attendee_counts(
        db, organizer_id=current_session.user_id, year=year
    )


@router.get("/extremes", response_model=AttendanceExtremes)
def get_attendance_extremes(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Top 5 and bottom 5 completed past events by attendance.
    """
    return crud_analytics.analytics.get_attendance_extremes(
        db, organizer_id=current_session.user_id, year=year
    )


@router.get("/no-shows/monthly", response_model=NoShowTotals)
def get_monthly_no_shows(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_analytics.analytics.get_monthly_no_shows(
        db, organizer_id=current_session.user_id, year=year
    )
