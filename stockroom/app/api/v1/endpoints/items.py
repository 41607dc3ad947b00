from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stockroom.app.api.deps import get_db
from stockroom.app.db.models.models_v1 import Item
from stockroom.app.schemas.item import ItemRead, ItemWrite, StockRead
from stockroom.services.inventory import get_stock

router = APIRouter(prefix="/items")


@router.get("", response_model=list[ItemRead])
def list_items(db: Session = Depends(get_db)):
    return db.execute(select(Item).order_by(Item.id)).scalars().all()


@router.post("", status_code=201)
def create_item(payload: ItemWrite, db: Session = Depends(get_db)):
    item = Item(name=payload.name, stock=payload.stock, price=payload.price)
    db.add(item)
    db.commit()
    db.refresh(item)
    return {"id": item.id}


@router.get("/{item_id}", response_model=ItemRead)
def get_item(item_id: int, db: Session = Depends(get_db)):
    item = db.get(Item, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.get("/{item_id}/stock", response_model=StockRead)
def get_item_stock(item_id: int, db: Session = Depends(get_db)):
    stock = get_stock(db, item_id)
    if stock is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"item_id": item_id, "stock": stock}


@router.put("/{item_id}")
def update_item(item_id: int, payload: ItemWrite, db: Session = Depends(get_db)):
    item = db.get(Item, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")

    item.name = payload.name
    item.stock = payload.stock
    item.price = payload.price
    db.commit()
    return {"updated": 1}


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    item = db.get(Item, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")

    db.delete(item)
    try:
        db.commit()
    except IntegrityError:
        # encore référencé par des lignes d'achat (FK RESTRICT)
        db.rollback()
        raise HTTPException(status_code=409, detail="Item is referenced by purchases")
    return Response(status_code=204)
