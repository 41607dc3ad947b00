"""
Purchasing service.

Valide une commande multi-lignes puis l'applique en UNE transaction :
en-tête d'achat + lignes + décrémentation conditionnelle du stock.
Soit tout est commité, soit rien (rollback complet).

La décrémentation elle-même est centralisée dans :
    stockroom.services.inventory
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stockroom.app.db.models.models_v1 import Item, Purchase, PurchaseLine, utcnow
from stockroom.app.schemas.purchase import PurchaseCreate
from stockroom.services.errors import (
    InsufficientStockOrUnknownItem,
    StorageError,
    ValidationError,
)
from stockroom.services.inventory import decrement_stock

logger = logging.getLogger(__name__)

_FIELD_MESSAGES = {
    "customer_name": "Customer name is required",
    "shipping_address": "Shipping address is required",
    "items": "At least one item is required",
    "item_id": "Item ID must be a positive integer",
    "quantity": "Quantity must be a positive integer",
}


def _message_for(loc: tuple) -> str:
    if not loc:
        return "Request body must be a JSON object"
    if loc[0] != "items" or len(loc) == 1:
        return _FIELD_MESSAGES.get(loc[0], "Invalid request")
    if len(loc) == 2:
        return "Each item must be an object"
    return _FIELD_MESSAGES.get(loc[2], "Invalid request")


def validate_purchase(payload: Any) -> PurchaseCreate:
    """
    Validation purement structurelle, sans accès base.

    Ne vérifie PAS le stock : il peut bouger avant le commit,
    c'est la décrémentation conditionnelle qui tranche.
    Lève ValidationError avec le message du premier champ fautif.
    """
    if isinstance(payload, PurchaseCreate):
        return payload
    try:
        return PurchaseCreate.model_validate(payload)
    except SchemaValidationError as exc:
        first = exc.errors()[0]
        raise ValidationError(_message_for(tuple(first["loc"]))) from None


def submit_purchase(db: Session, request: PurchaseCreate) -> int:
    """
    Exécute un achat validé comme une seule unité de travail.

    Séquence (ordre des lignes respecté) :
        1. INSERT purchases -> id
        2. pour chaque ligne : décrémentation conditionnelle,
           puis INSERT purchase_lines si elle a touché une ligne
        3. si une décrémentation a échoué -> ROLLBACK complet
           sinon -> COMMIT

    Les échecs de lignes sont agrégés (on traite toutes les lignes),
    le client ne reçoit qu'une erreur globale.
    Retourne l'id du nouvel achat.
    """
    failed_lines: list[int] = []

    try:
        purchase = Purchase(
            customer_name=request.customer_name,
            shipping_address=request.shipping_address,
            created_at=utcnow(),
        )
        db.add(purchase)
        db.flush()  # get purchase.id
        purchase_id = int(purchase.id)

        for position, line in enumerate(request.items):
            affected = decrement_stock(db, item_id=line.item_id, quantity=line.quantity)
            if affected == 0:
                failed_lines.append(position)
                continue

            purchase.lines.append(PurchaseLine(item_id=line.item_id, quantity=line.quantity))

        if failed_lines:
            db.rollback()
        else:
            db.flush()
            db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Purchase failed at storage layer (customer=%r)", request.customer_name)
        raise StorageError() from exc
    except Exception:
        db.rollback()
        raise

    if failed_lines:
        logger.warning(
            "Purchase rolled back: insufficient stock or unknown item on lines %s",
            failed_lines,
        )
        raise InsufficientStockOrUnknownItem(lines=failed_lines)

    logger.info("Purchase %s committed (%d lines)", purchase_id, len(request.items))
    return purchase_id


def list_purchase_rows(db: Session) -> list[dict]:
    """
    Historique à plat : une ligne par (achat, item), achats les plus récents d'abord.
    Le regroupement par achat est laissé au client.
    """
    rows = db.execute(
        select(
            Purchase.id,
            Purchase.customer_name,
            Purchase.created_at,
            Item.name,
            Item.price,
            PurchaseLine.quantity,
        )
        .join(PurchaseLine, PurchaseLine.purchase_id == Purchase.id)
        .join(Item, Item.id == PurchaseLine.item_id)
        .order_by(Purchase.id.desc(), PurchaseLine.id.asc())
    ).all()

    return [
        {
            "purchase_id": int(pid),
            "customer_name": customer_name,
            "created_at": created_at,
            "item_name": item_name,
            "price": float(price),
            "quantity": int(quantity),
        }
        for pid, customer_name, created_at, item_name, price, quantity in rows
    ]
