# eventboard/crud/crud_event_details.py
from sqlalchemy.orm import Session

from eventboard.crud import crud_event, crud_organizer
from eventboard.crud.crud_agenda import agenda
from eventboard.crud.crud_attachment import attachment
from eventboard.crud.crud_comment import comment
from eventboard.crud.crud_faq import faq
from eventboard.crud.crud_speaker import speaker
from eventboard.db.session import storage_errors
from eventboard.models.event import Event
from eventboard.schemas.event_details import EventDetailsUpdate


def get_details(db: Session, *, event: Event) -> dict:
    """
    Everything the event page shows besides the event row itself. A missing
    organizer profile is reported as ``None`` instead of failing the page.
    """
    return {
        "organizer": crud_organizer.organizer.get(db, id=event.organizer_id),
        "agenda": agenda.get_multi_by_event(db, event_id=event.id),
        "speakers": speaker.get_multi_by_event(db, event_id=event.id),
        "faqs": faq.get_multi_by_event(db, event_id=event.id),
        "attachments": attachment.get_multi_by_event(db, event_id=event.id),
        "comments": comment.get_multi_by_event(db, event_id=event.id),
        "related_events": crud_event.event.get_related(db, event=event),
    }


def update_details(db: Session, *, event: Event, details_in: EventDetailsUpdate) -> None:
    """
    Applies every section of ``details_in`` in one transaction: a failing item
    in any section discards the writes of all sections.
    """
    sections = (
        (agenda, details_in.agenda),
        (speaker, details_in.speakers),
        (faq, details_in.faqs),
        (attachment, details_in.attachments),
        (comment, details_in.comments),
    )
    for accessor, items in sections:
        accessor.upsert_many_for_event(db, objs_in=items, event_id=event.id, commit=False)
    with storage_errors(db):
        db.commit()
