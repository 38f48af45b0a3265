from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventboard.crud import crud_category
from eventboard.db.session import get_db
from eventboard.schemas.category import Category

router = APIRouter(tags=["Categories"])


@router.get("/categories", response_model=List[Category])
def list_categories(db: Session = Depends(get_db)):
    return crud_category.category.get_all(db)
