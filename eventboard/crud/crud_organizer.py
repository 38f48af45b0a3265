# eventboard/crud/crud_organizer.py
from sqlalchemy.orm import Session

from .base import CRUDBase
from eventboard.core.exceptions import NotFoundError
from eventboard.models.organizer import Organizer
from eventboard.schemas.organizer import OrganizerData


class CRUDOrganizer(CRUDBase[Organizer, OrganizerData, OrganizerData]):
    # The organizer row reuses its user's id, so "scope" and "id" coincide.

    def get_or_404(self, db: Session, *, id: int) -> Organizer:
        organizer = self.get(db, id=id)
        if not organizer:
            raise NotFoundError("Organizer")
        return organizer

    def create_for_user(
        self, db: Session, *, obj_in: OrganizerData, user_id: int
    ) -> Organizer:
        return self.create(db, obj_in=obj_in, id=user_id)

    def replace(self, db: Session, *, obj_in: OrganizerData, user_id: int) -> Organizer:
        """Full replace: optional fields missing from the body are cleared."""
        organizer = self.get_or_404(db, id=user_id)
        return self.update(db, db_obj=organizer, obj_in=obj_in.model_dump())


organizer = CRUDOrganizer(Organizer)
