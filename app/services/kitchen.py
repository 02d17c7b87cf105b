from sqlalchemy.orm import Session

import app.repositories.kitchen as kitchen_repo
import app.repositories.restaurant as restaurant_repo
from app.db.models.kitchen import Kitchen as KitchenModel
from app.errors import EntityInUseError, KitchenNotFoundError


def get_kitchen(db: Session, kitchen_id: int) -> KitchenModel:
    """
    Get a kitchen or fail.

    Raises:
        KitchenNotFoundError: If the kitchen doesn't exist
    """
    kitchen = kitchen_repo.get_kitchen_by_id(db, kitchen_id)
    if not kitchen:
        raise KitchenNotFoundError(kitchen_id)
    return kitchen


def delete_kitchen(db: Session, kitchen_id: int) -> None:
    """
    Delete a kitchen with business logic validation.

    - Validates kitchen exists
    - Validates no restaurant references the kitchen

    Raises:
        KitchenNotFoundError: If the kitchen doesn't exist
        EntityInUseError: If restaurants still reference the kitchen
    """
    kitchen = get_kitchen(db, kitchen_id)

    if restaurant_repo.count_restaurants_by_kitchen_id(db, kitchen_id):
        raise EntityInUseError(
            f"kitchen {kitchen_id} is in use and cannot be removed"
        )

    kitchen_repo.delete_kitchen(db, kitchen)
