# eventboard/crud/crud_event_child.py
"""
Shared accessor for rows owned by a single event (agenda items, speakers,
FAQs, attachments, comments).
"""
from typing import Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from eventboard.core.exceptions import NotFoundError
from eventboard.db.base_class import Base
from eventboard.db.session import storage_errors

ModelType = TypeVar("ModelType", bound=Base)
InSchemaType = TypeVar("InSchemaType", bound=BaseModel)


class CRUDEventChild(Generic[ModelType, InSchemaType]):
    def __init__(self, model: Type[ModelType], name: str):
        self.model = model
        self.name = name

    def get_multi_by_event(self, db: Session, *, event_id: int) -> List[ModelType]:
        with storage_errors(db):
            return (
                db.query(self.model)
                .filter(self.model.event_id == event_id)
                .order_by(self.model.id)
                .all()
            )

    def get_by_event(self, db: Session, *, id: int, event_id: int) -> ModelType:
        with storage_errors(db):
            db_obj = (
                db.query(self.model)
                .filter(self.model.id == id, self.model.event_id == event_id)
                .first()
            )
        if not db_obj:
            raise NotFoundError(self.name, details={"id": id, "event_id": event_id})
        return db_obj

    def _fields(self, obj_in: InSchemaType) -> dict:
        return obj_in.model_dump(exclude={"id", "event_id"})

    def create_many_for_event(
        self,
        db: Session,
        *,
        objs_in: Sequence[InSchemaType],
        event_id: int,
        commit: bool = True,
    ) -> List[ModelType]:
        """
        Inserts every item or none of them. With ``commit=False`` the rows are
        only flushed so the caller can commit several batches together.
        """
        db_objs = [self.model(**self._fields(o), event_id=event_id) for o in objs_in]
        with storage_errors(db):
            db.add_all(db_objs)
            db.flush()
            if commit:
                db.commit()
                for db_obj in db_objs:
                    db.refresh(db_obj)
        return db_objs

    def update_many_for_event(
        self,
        db: Session,
        *,
        objs_in: Sequence[InSchemaType],
        event_id: int,
        commit: bool = True,
    ) -> None:
        """
        Full-row replace of each item by id. An id that is not one of this
        event's rows aborts the whole batch.
        """
        try:
            for obj_in in objs_in:
                db_obj = self.get_by_event(db, id=obj_in.id, event_id=event_id)
                for field, value in self._fields(obj_in).items():
                    setattr(db_obj, field, value)
            with storage_errors(db):
                db.flush()
                if commit:
                    db.commit()
        except NotFoundError:
            db.rollback()
            raise

    def upsert_many_for_event(
        self,
        db: Session,
        *,
        objs_in: Sequence[InSchemaType],
        event_id: int,
        commit: bool = True,
    ) -> None:
        """Items carrying an id are updated, the rest are created."""
        existing = [o for o in objs_in if o.id is not None]
        new = [o for o in objs_in if o.id is None]
        self.update_many_for_event(db, objs_in=existing, event_id=event_id, commit=False)
        self.create_many_for_event(db, objs_in=new, event_id=event_id, commit=commit)
