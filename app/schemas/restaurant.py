from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.db.base import MAX_ID
from app.schemas.kitchen import Kitchen


class Restaurant(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    shipping_fee: Decimal
    kitchen: Kitchen


class KitchenRef(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., ge=1, le=MAX_ID)


class RestaurantInput(BaseModel):
    """Body for create and update. Unknown properties are rejected."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=80)
    shipping_fee: Decimal = Field(..., ge=0)
    kitchen: KitchenRef
