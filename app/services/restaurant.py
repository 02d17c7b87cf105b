from decimal import Decimal

from sqlalchemy.orm import Session

import app.repositories.restaurant as restaurant_repo
from app.db.models.restaurant import Restaurant as RestaurantModel
from app.errors import BusinessRuleError, KitchenNotFoundError, RestaurantNotFoundError
from app.services.kitchen import get_kitchen


def get_restaurant(db: Session, restaurant_id: int) -> RestaurantModel:
    """
    Get a restaurant or fail.

    Raises:
        RestaurantNotFoundError: If the restaurant doesn't exist
    """
    restaurant = restaurant_repo.get_restaurant_by_id(db, restaurant_id)
    if not restaurant:
        raise RestaurantNotFoundError(restaurant_id)
    return restaurant


def _require_kitchen(db: Session, kitchen_id: int) -> None:
    # A missing kitchen in the payload is the client's mistake, not a missing resource.
    try:
        get_kitchen(db, kitchen_id)
    except KitchenNotFoundError as exc:
        raise BusinessRuleError(str(exc)) from exc


def create_restaurant(
    db: Session, name: str, shipping_fee: Decimal, kitchen_id: int
) -> RestaurantModel:
    """
    Create a restaurant with domain validation.

    Raises:
        BusinessRuleError: If the referenced kitchen doesn't exist
    """
    _require_kitchen(db, kitchen_id)
    return restaurant_repo.create_restaurant(
        db, name=name, shipping_fee=shipping_fee, kitchen_id=kitchen_id
    )


def update_restaurant(
    db: Session,
    restaurant_id: int,
    name: str,
    shipping_fee: Decimal,
    kitchen_id: int,
) -> RestaurantModel:
    """
    Update a restaurant with domain validation.

    Raises:
        RestaurantNotFoundError: If the restaurant doesn't exist
        BusinessRuleError: If the referenced kitchen doesn't exist
    """
    restaurant = get_restaurant(db, restaurant_id)
    _require_kitchen(db, kitchen_id)
    return restaurant_repo.update_restaurant(
        db,
        restaurant,
        name=name,
        shipping_fee=shipping_fee,
        kitchen_id=kitchen_id,
    )


def delete_restaurant(db: Session, restaurant_id: int) -> None:
    """
    Delete a restaurant.

    Raises:
        RestaurantNotFoundError: If the restaurant doesn't exist
    """
    restaurant = get_restaurant(db, restaurant_id)
    restaurant_repo.delete_restaurant(db, restaurant)
