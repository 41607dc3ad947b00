from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from stockroom.app.db.models.models_v1 import Item


def decrement_stock(db: Session, *, item_id: int, quantity: int) -> int:
    """
    Décrémente le stock d'un item SI le stock courant >= quantity.

    Une seule instruction SQL :
        UPDATE items SET stock = stock - :q WHERE id = :id AND stock >= :q

    Retourne le nombre de lignes touchées (0 ou 1).
    0 => item inconnu OU stock insuffisant (indiscernables ici).

    Propriétés :
    - atomique (pas de lecture puis écriture)
    - ne fait jamais passer le stock sous zéro
    - ne commit pas : s'exécute dans la transaction de l'appelant
    """
    if quantity <= 0:
        raise ValueError("quantity must be > 0")

    result = db.execute(
        update(Item)
        .where(Item.id == item_id)
        .where(Item.stock >= quantity)
        .values(stock=Item.stock - quantity)
        .execution_options(synchronize_session=False)
    )
    return int(result.rowcount)


def get_stock(db: Session, item_id: int) -> int | None:
    """Stock courant d'un item (lecture seule), None si l'item n'existe pas."""
    stock = db.execute(select(Item.stock).where(Item.id == item_id)).scalar_one_or_none()
    if stock is None:
        return None
    return int(stock)
