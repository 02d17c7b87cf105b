from pydantic import BaseModel, ConfigDict, Field


class Kitchen(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class KitchenCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=60)
