from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from pantrypal.db import get_db
from pantrypal import crud

router = APIRouter(prefix="/backup", tags=["backup"])


@router.get("")
def export_backup(db: Session = Depends(get_db)):
    return crud.export_all(db)


@router.post("")
def import_backup(data: Any = Body(...), db: Session = Depends(get_db)):
    try:
        counts = crud.import_all(db, data)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return {"ok": True, "restored": counts}
