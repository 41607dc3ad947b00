from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

# strict : pas de coercition silencieuse (True -> 1, "3" -> 3, 3.0 -> 3)
NonBlankText = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]
# borné à BIGINT : au-delà, le driver lève OverflowError
MAX_DB_INT = 2**63 - 1
PositiveInt = Annotated[int, Field(strict=True, gt=0, le=MAX_DB_INT)]


class PurchaseLineCreate(BaseModel):
    item_id: PositiveInt
    quantity: PositiveInt


class PurchaseCreate(BaseModel):
    customer_name: NonBlankText
    shipping_address: NonBlankText
    items: list[PurchaseLineCreate] = Field(min_length=1)


class PurchaseCreated(BaseModel):
    purchase_id: int


class PurchaseRow(BaseModel):
    """Une ligne d'historique (non regroupée par achat)."""

    purchase_id: int
    customer_name: str
    created_at: datetime
    item_name: str
    price: float
    quantity: int
