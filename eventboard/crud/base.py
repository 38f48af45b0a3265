# eventboard/crud/base.py
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from eventboard.db.base_class import Base
from eventboard.db.session import storage_errors

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create, Read, Update, Delete (CRUD).

        **Parameters**

        * `model`: A SQLAlchemy model class

        Every method commits on success. Any SQLAlchemy failure rolls the
        session back and surfaces as StorageError.
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        with storage_errors(db):
            return db.query(self.model).filter(self.model.id == id).first()

    def create(self, db: Session, *, obj_in: CreateSchemaType, **extra: Any) -> ModelType:
        db_obj = self.model(**obj_in.model_dump(), **extra)
        with storage_errors(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        with storage_errors(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, id: Any) -> None:
        with storage_errors(db):
            db.query(self.model).filter(self.model.id == id).delete()
            db.commit()
