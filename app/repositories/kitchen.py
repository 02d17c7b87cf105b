from sqlalchemy.orm import Session

from app.db.models.kitchen import Kitchen as KitchenModel


def get_kitchen_by_id(db: Session, kitchen_id: int) -> KitchenModel | None:
    """Get a kitchen by ID."""
    return db.query(KitchenModel).filter(KitchenModel.id == kitchen_id).first()


def get_all_kitchens(db: Session) -> list[KitchenModel]:
    """Get all kitchens."""
    return db.query(KitchenModel).order_by(KitchenModel.id).all()


def create_kitchen(db: Session, name: str) -> KitchenModel:
    """Create a new kitchen in the database. Pure data access - no business logic."""
    db_kitchen = KitchenModel(name=name)
    db.add(db_kitchen)
    db.commit()
    db.refresh(db_kitchen)
    return db_kitchen


def delete_kitchen(db: Session, kitchen: KitchenModel) -> None:
    db.delete(kitchen)
    db.commit()
