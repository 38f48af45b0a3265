# eventboard/api/v1/endpoints/events.py
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from eventboard.api import deps
from eventboard.crud import crud_analytics, crud_event, crud_event_details
from eventboard.db.session import get_db
from eventboard.models.session import Session as SessionModel
from eventboard.schemas.analytics import EventCounts, TicketTotals
from eventboard.schemas.event import Event, EventCreate, EventUpdate
from eventboard.schemas.event_details import EventDetails, EventDetailsUpdate

router = APIRouter(prefix="/events", tags=["Events"])


# The fixed report paths are declared before "/{event_id}" so they are not
# captured by it.

@router.get("/sales", response_model=TicketTotals)
def get_monthly_ticket_sales(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Monthly ticket revenue (tickets sold x price) and the yearly total.
    """
    return crud_analytics.analytics.get_ticket_totals(
        db, organizer_id=current_session.user_id, year=year
    )


@router.get("/counts/daily", response_model=EventCounts)
def get_daily_event_counts(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_analytics.analytics.get_daily_event_counts(
        db, organizer_id=current_session.user_id, year=year
    )


@router.get("", response_model=List[Event])
def list_events(
    year: int = Query(..., ge=1, le=9998),
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    The caller's events for a year, ordered by event date.
    """
    return crud_event.event.get_multi_by_organizer(
        db, organizer_id=current_session.user_id, year=year
    )


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_event.event.create_with_organizer(
        db, obj_in=event_in, organizer_id=current_session.user_id
    )


@router.get("/{event_id}", response_model=Event)
def get_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_event.event.get_by_organizer(
        db, id=event_id, organizer_id=current_session.user_id
    )


@router.put("/{event_id}", response_model=Event)
def update_event(
    event_id: int,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    return crud_event.event.update_for_organizer(
        db, id=event_id, obj_in=event_in, organizer_id=current_session.user_id
    )


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    crud_event.event.remove_for_organizer(
        db, id=event_id, organizer_id=current_session.user_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{event_id}/details", response_model=EventDetails)
def get_event_details(
    event_id: int,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Organizer profile, agenda, speakers, FAQs, attachments, comments and up to
    three related events for one of the caller's events.
    """
    event = crud_event.event.get_by_organizer(
        db, id=event_id, organizer_id=current_session.user_id
    )
    return crud_event_details.get_details(db, event=event)


@router.put("/{event_id}/details", response_model=EventDetails)
def update_event_details(
    event_id: int,
    details_in: EventDetailsUpdate,
    db: Session = Depends(get_db),
    current_session: SessionModel = Depends(deps.get_current_session),
):
    """
    Bulk write of the event's sub-resources: items with an id replace that
    row, items without one are created. All or nothing.
    """
    event = crud_event.event.get_by_organizer(
        db, id=event_id, organizer_id=current_session.user_id
    )
    crud_event_details.update_details(db, event=event, details_in=details_in)
    return crud_event_details.get_details(db, event=event)
