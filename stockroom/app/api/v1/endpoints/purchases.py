from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from stockroom.app.api.deps import get_db
from stockroom.app.schemas.purchase import PurchaseCreated, PurchaseRow
from stockroom.services.errors import (
    InsufficientStockOrUnknownItem,
    StorageError,
    ValidationError,
)
from stockroom.services.purchasing import (
    list_purchase_rows,
    submit_purchase,
    validate_purchase,
)

router = APIRouter(prefix="/purchases")


@router.get("", response_model=list[PurchaseRow])
def list_purchases(db: Session = Depends(get_db)):
    return list_purchase_rows(db)


@router.post("", status_code=201, response_model=PurchaseCreated)
def create_purchase(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Crée un achat multi-lignes (tout ou rien).

    Le corps brut est validé ici (et non par FastAPI) pour garder
    des messages d'erreur précis et un format unique {code, message}.
    Corps absent ou `null` : payload vaut None, rejeté par le validateur.
    """
    try:
        request = validate_purchase(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.to_detail())

    try:
        purchase_id = submit_purchase(db, request)
    except InsufficientStockOrUnknownItem as exc:
        raise HTTPException(status_code=400, detail=exc.to_detail())
    except StorageError as exc:
        raise HTTPException(status_code=500, detail=exc.to_detail())

    return {"purchase_id": purchase_id}
