from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), nullable=False)
    shipping_fee = Column(Numeric(10, 2), nullable=False)
    kitchen_id = Column(Integer, ForeignKey("kitchens.id"), nullable=False, index=True)

    # Relationship
    kitchen = relationship("Kitchen", backref="restaurants")
