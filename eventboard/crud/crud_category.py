from typing import List

from sqlalchemy.orm import Session

from .base import CRUDBase
from eventboard.db.session import storage_errors
from eventboard.models.category import Category
from eventboard.schemas.category import Category as CategorySchema


class CRUDCategory(CRUDBase[Category, CategorySchema, CategorySchema]):
    # Reference data shared by every organizer; only read through the API.

    def get_all(self, db: Session) -> List[Category]:
        """Every category, unpaginated."""
        with storage_errors(db):
            return db.query(self.model).order_by(self.model.id).all()


category = CRUDCategory(Category)
