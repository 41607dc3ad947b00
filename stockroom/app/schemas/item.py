from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ItemWrite(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    stock: int = Field(strict=True, ge=0)
    price: float = Field(strict=True, ge=0)


class ItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    stock: int
    price: float


class StockRead(BaseModel):
    item_id: int
    stock: int  # READ ONLY : seule la décrémentation conditionnelle écrit ici hors CRUD
