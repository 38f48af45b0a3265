from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from eventboard.api import deps
from eventboard.crud import crud_analytics
from eventboard.db.session import get_db
from eventboard.models.session import Session as SessionModel
from eventboard.schemas.analytics import MonthlyTotals

router = APIRouter(prefix="/overview", tags=["Overview"])


@router.get("/totals", response_model=MonthlyTotals)
def get_monthly_totals(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Per-month events, upcoming and canceled events, tickets sold and
    attendees for the caller's events in ``year``.
    """
    return crud_analytics.analytics.get_monthly_totals(
        db, organizer_id=current_session.user_id, year=year
    )
