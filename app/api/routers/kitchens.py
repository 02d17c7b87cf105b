from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.db.base import MAX_ID
import app.repositories.kitchen as kitchen_repo
from app.services.kitchen import delete_kitchen, get_kitchen
from app.schemas.kitchen import Kitchen, KitchenCreate

router = APIRouter(prefix="/kitchens", tags=["kitchens"])

KitchenId = Annotated[int, Path(ge=1, le=MAX_ID, description="Kitchen ID")]


@router.get("", response_model=list[Kitchen])
def get_all_kitchens(db: Session = Depends(get_db)):
    return [Kitchen.model_validate(k) for k in kitchen_repo.get_all_kitchens(db)]


@router.get("/{kitchen_id}", response_model=Kitchen)
def get_kitchen_by_id(kitchen_id: KitchenId, db: Session = Depends(get_db)):
    """
    Get a kitchen by ID. Answers 404 (resource-not-found) when it doesn't exist.
    """
    return Kitchen.model_validate(get_kitchen(db, kitchen_id))


@router.post("", response_model=Kitchen, status_code=status.HTTP_201_CREATED)
def create_new_kitchen(kitchen_data: KitchenCreate, db: Session = Depends(get_db)):
    """
    Create a new kitchen. Unknown properties in the body are rejected.
    """
    kitchen = kitchen_repo.create_kitchen(db, name=kitchen_data.name)
    return Kitchen.model_validate(kitchen)


@router.delete("/{kitchen_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_kitchen_by_id(kitchen_id: KitchenId, db: Session = Depends(get_db)):
    """
    Delete a kitchen by ID.

    A kitchen can only be deleted if no restaurant references it; otherwise
    the answer is 409 (resource-in-use).
    """
    delete_kitchen(db, kitchen_id)
