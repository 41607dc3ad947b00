from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select

from stockroom.app.db.base import Base
from stockroom.app.db.models.models_v1 import Item
from stockroom.app.db.session import SessionLocal, engine

DEMO_ITEMS = [
    ("Riz parfumé 5kg", 120, Decimal("14.50")),
    ("Farine T55 1kg", 80, Decimal("2.10")),
    ("Huile de coco 1L", 40, Decimal("7.90")),
]


def run_seed():
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        # catalogue vide uniquement : on n'écrase jamais un stock existant
        if db.scalar(select(Item.id).limit(1)) is not None:
            print("SEED SKIPPED: items already present")
            return

        for name, stock, price in DEMO_ITEMS:
            db.add(Item(name=name, stock=stock, price=price))
        db.commit()

        print(f"SEED OK: {len(DEMO_ITEMS)} items")
    finally:
        db.close()


if __name__ == "__main__":
    run_seed()
