from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pantrypal.db import get_db
from pantrypal.schemas.pantry import PantryItemOut, ShoppingItemCreate, ShoppingItemOut
from pantrypal import crud

router = APIRouter(prefix="/shopping", tags=["shopping"])


@router.get("", response_model=list[ShoppingItemOut])
def list_shopping(db: Session = Depends(get_db)):
    return crud.list_shopping_items(db)


@router.post("", response_model=ShoppingItemOut)
def create_item(payload: ShoppingItemCreate, db: Session = Depends(get_db)):
    return crud.create_shopping_item(db, payload.name)


@router.delete("")
def clear_shopping(db: Session = Depends(get_db)):
    removed = crud.clear_shopping(db)
    return {"ok": True, "removed": removed}


@router.post("/purchase-all")
def purchase_all(db: Session = Depends(get_db)):
    purchased = crud.mark_all_purchased(db)
    return {"ok": True, "purchased": purchased}


@router.delete("/{item_id}")
def delete_item(item_id: int, db: Session = Depends(get_db)):
    ok = crud.delete_shopping_item(db, item_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Shopping item not found")
    return {"ok": True}


@router.post("/{item_id}/purchase", response_model=PantryItemOut)
def purchase_item(item_id: int, db: Session = Depends(get_db)):
    item = crud.mark_purchased(db, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Shopping item not found")
    return item
