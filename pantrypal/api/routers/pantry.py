from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pantrypal.db import get_db
from pantrypal.schemas.pantry import (
    ImportResult,
    PantryImportIn,
    PantryItemCreate,
    PantryItemOut,
    PantryItemUpdate,
    ShoppingItemOut,
)
from pantrypal.services.listing import PANTRY_SORTS, filter_pantry, queued_names
from pantrypal.services.matching import normalize_text
from pantrypal import crud

router = APIRouter(prefix="/pantry", tags=["pantry"])


def _out(item, queued: set[str]) -> PantryItemOut:
    return PantryItemOut(
        id=item.id,
        name=item.name,
        available=item.available,
        in_shopping=normalize_text(item.name) in queued,
    )


@router.get("", response_model=list[PantryItemOut])
def list_pantry(
    search: str = Query(default=""),
    sort: str = Query(default="alpha", description="alpha|available|none"),
    db: Session = Depends(get_db),
):
    if sort not in PANTRY_SORTS:
        raise HTTPException(status_code=422, detail=f"sort must be one of: {list(PANTRY_SORTS)}")
    queued = queued_names(crud.list_shopping_items(db))
    items = filter_pantry(crud.list_pantry_items(db), search=search, sort=sort)
    return [_out(i, queued) for i in items]


@router.post("", response_model=PantryItemOut)
def create_item(payload: PantryItemCreate, db: Session = Depends(get_db)):
    try:
        item = crud.create_pantry_item(db, payload.name, available=payload.available)
    except crud.DuplicateNameError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return _out(item, queued_names(crud.list_shopping_items(db)))


@router.post("/import", response_model=ImportResult)
def import_items(payload: PantryImportIn, db: Session = Depends(get_db)):
    imported, skipped = crud.import_pantry_lines(db, payload.text)
    return ImportResult(imported=imported, skipped=skipped)


@router.patch("/{item_id}", response_model=PantryItemOut)
def patch_item(item_id: int, payload: PantryItemUpdate, db: Session = Depends(get_db)):
    try:
        item = crud.update_pantry_item(db, item_id, name=payload.name, available=payload.available)
    except crud.DuplicateNameError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if not item:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    return _out(item, queued_names(crud.list_shopping_items(db)))


@router.delete("/{item_id}")
def delete_item(item_id: int, db: Session = Depends(get_db)):
    ok = crud.delete_pantry_item(db, item_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    return {"ok": True}


@router.post("/{item_id}/shop", response_model=ShoppingItemOut)
def shop_item(item_id: int, db: Session = Depends(get_db)):
    entry = crud.add_pantry_item_to_shopping(db, item_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Pantry item not found")
    return entry
