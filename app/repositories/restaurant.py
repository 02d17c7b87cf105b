from decimal import Decimal

from sqlalchemy.orm import Session

from app.db.models.restaurant import Restaurant as RestaurantModel


def get_restaurant_by_id(db: Session, restaurant_id: int) -> RestaurantModel | None:
    """Get a restaurant by ID."""
    return db.query(RestaurantModel).filter(RestaurantModel.id == restaurant_id).first()


def get_restaurants_page(
    db: Session, page: int, page_size: int
) -> tuple[list[RestaurantModel], int]:
    """Get one page of restaurants ordered by ID, plus the total count."""
    query = db.query(RestaurantModel)
    total = query.count()
    items = (
        query.order_by(RestaurantModel.id)
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return items, total


def count_restaurants_by_kitchen_id(db: Session, kitchen_id: int) -> int:
    """Count restaurants that reference a kitchen."""
    return (
        db.query(RestaurantModel).filter(RestaurantModel.kitchen_id == kitchen_id).count()
    )


def create_restaurant(
    db: Session, name: str, shipping_fee: Decimal, kitchen_id: int
) -> RestaurantModel:
    """Create a new restaurant in the database. Pure data access - no business logic."""
    db_restaurant = RestaurantModel(
        name=name, shipping_fee=shipping_fee, kitchen_id=kitchen_id
    )
    db.add(db_restaurant)
    db.commit()
    db.refresh(db_restaurant)
    return db_restaurant


def update_restaurant(
    db: Session,
    restaurant: RestaurantModel,
    name: str,
    shipping_fee: Decimal,
    kitchen_id: int,
) -> RestaurantModel:
    restaurant.name = name
    restaurant.shipping_fee = shipping_fee
    restaurant.kitchen_id = kitchen_id
    db.commit()
    db.refresh(restaurant)
    return restaurant


def delete_restaurant(db: Session, restaurant: RestaurantModel) -> None:
    db.delete(restaurant)
    db.commit()
