# eventboard/crud/crud_event.py
from datetime import date, datetime
from typing import List, Tuple

from sqlalchemy.orm import Session

from .base import CRUDBase
from eventboard.core.exceptions import NotFoundError
from eventboard.db.session import storage_errors
from eventboard.models.event import Event
from eventboard.schemas.event import EventCreate, EventUpdate

RELATED_EVENTS_LIMIT = 3


def year_bounds(year: int) -> Tuple[date, date]:
    """Half-open [Jan 1 of year, Jan 1 of year + 1) range for event_date filters."""
    return date(year, 1, 1), date(year + 1, 1, 1)


class CRUDEvent(CRUDBase[Event, EventCreate, EventUpdate]):

    def get_multi_by_organizer(
        self, db: Session, *, organizer_id: int, year: int
    ) -> List[Event]:
        """
        All of an organizer's events dated within ``year``, earliest first.
        """
        start, end = year_bounds(year)
        with storage_errors(db):
            return (
                db.query(self.model)
                .filter(
                    self.model.organizer_id == organizer_id,
                    self.model.event_date >= start,
                    self.model.event_date < end,
                )
                .order_by(self.model.event_date.asc(), self.model.id.asc())
                .all()
            )

    def get_by_organizer(self, db: Session, *, id: int, organizer_id: int) -> Event:
        """
        Fetches one event. An id that exists but belongs to another organizer
        is reported exactly like a missing one.
        """
        with storage_errors(db):
            db_obj = (
                db.query(self.model)
                .filter(self.model.id == id, self.model.organizer_id == organizer_id)
                .first()
            )
        if not db_obj:
            raise NotFoundError("Event", details={"event_id": id})
        return db_obj

    def create_with_organizer(
        self, db: Session, *, obj_in: EventCreate, organizer_id: int
    ) -> Event:
        return self.create(db, obj_in=obj_in, organizer_id=organizer_id)

    def update_for_organizer(
        self, db: Session, *, id: int, obj_in: EventUpdate, organizer_id: int
    ) -> Event:
        """Full-row replace; ``updated_at`` is always refreshed."""
        db_obj = self.get_by_organizer(db, id=id, organizer_id=organizer_id)
        update_data = obj_in.model_dump()
        update_data["updated_at"] = datetime.utcnow()
        return self.update(db, db_obj=db_obj, obj_in=update_data)

    def remove_for_organizer(self, db: Session, *, id: int, organizer_id: int) -> None:
        db_obj = self.get_by_organizer(db, id=id, organizer_id=organizer_id)
        with storage_errors(db):
            # ORM delete so the sub-resource cascade runs
            db.delete(db_obj)
            db.commit()

    def get_related(self, db: Session, *, event: Event) -> List[Event]:
        """Other events by the same organizer in the same category."""
        if event.category_id is None:
            return []
        with storage_errors(db):
            return (
                db.query(self.model)
                .filter(
                    self.model.organizer_id == event.organizer_id,
                    self.model.category_id == event.category_id,
                    self.model.id != event.id,
                )
                .order_by(self.model.event_date.asc(), self.model.id.asc())
                .limit(RELATED_EVENTS_LIMIT)
                .all()
            )


event = CRUDEvent(Event)
