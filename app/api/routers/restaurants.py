from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.db.base import MAX_ID
import app.repositories.restaurant as restaurant_repo
from app.services.restaurant import (
    create_restaurant,
    delete_restaurant,
    get_restaurant,
    update_restaurant,
)
from app.schemas.pagination import PaginatedResponse
from app.schemas.restaurant import Restaurant, RestaurantInput

router = APIRouter(prefix="/restaurants", tags=["restaurants"])

RestaurantId = Annotated[int, Path(ge=1, le=MAX_ID, description="Restaurant ID")]


@router.get("", response_model=PaginatedResponse[Restaurant])
def get_all_restaurants(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(100, ge=1, le=1000, description="Number of items per page"),
    db: Session = Depends(get_db),
):
    """
    Get restaurants ordered by ID, one page at a time.
    """
    items, total = restaurant_repo.get_restaurants_page(db, page, page_size)
    return PaginatedResponse(
        items=[Restaurant.model_validate(r) for r in items],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{restaurant_id}", response_model=Restaurant)
def get_restaurant_by_id(
    restaurant_id: RestaurantId, db: Session = Depends(get_db)
):
    return Restaurant.model_validate(get_restaurant(db, restaurant_id))


@router.post("", response_model=Restaurant, status_code=status.HTTP_201_CREATED)
def create_new_restaurant(
    restaurant_data: RestaurantInput, db: Session = Depends(get_db)
):
    """
    Create a new restaurant.

    Referencing a kitchen that doesn't exist is a business rule violation
    (400), not a missing resource.
    """
    restaurant = create_restaurant(
        db,
        name=restaurant_data.name,
        shipping_fee=restaurant_data.shipping_fee,
        kitchen_id=restaurant_data.kitchen.id,
    )
    return Restaurant.model_validate(restaurant)


@router.put("/{restaurant_id}", response_model=Restaurant)
def update_restaurant_by_id(
    restaurant_id: RestaurantId,
    restaurant_data: RestaurantInput,
    db: Session = Depends(get_db),
):
    """
    Replace a restaurant. The same kitchen rule as on creation applies.
    """
    restaurant = update_restaurant(
        db,
        restaurant_id=restaurant_id,
        name=restaurant_data.name,
        shipping_fee=restaurant_data.shipping_fee,
        kitchen_id=restaurant_data.kitchen.id,
    )
    return Restaurant.model_validate(restaurant)


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_restaurant_by_id(
    restaurant_id: RestaurantId, db: Session = Depends(get_db)
):
    delete_restaurant(db, restaurant_id)
