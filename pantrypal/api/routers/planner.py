from __future__ import annotations

import datetime as dt
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pantrypal.db import get_db
from pantrypal.schemas.planner import DayOut, PickerEntryOut, PlanMealIn, PlannedMealOut, WeekOut
from pantrypal.services.feasibility import sort_for_picker
from pantrypal.services.week import build_week, today_local, week_days
from pantrypal import crud

router = APIRouter(prefix="/planner", tags=["planner"])


@router.get("/week", response_model=WeekOut)
def get_week(
    date: dt.date | None = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
):
    day = date or today_local()
    days = build_week(day, crud.list_planned_meals(db), crud.list_recipes(db))
    return WeekOut(
        week_start=week_days(day)[0].date,
        days=[DayOut.model_validate(asdict(d)) for d in days],
    )


@router.get("/picker", response_model=list[PickerEntryOut])
def get_picker(search: str = Query(default=""), db: Session = Depends(get_db)):
    entries = sort_for_picker(crud.list_recipes(db), crud.list_pantry_items(db), search=search)
    return [
        PickerEntryOut(
            id=e.recipe.id,
            name=e.recipe.name,
            category=e.recipe.category or "",
            can_make=e.can_make,
        )
        for e in entries
    ]


@router.delete("")
def clear_planner(db: Session = Depends(get_db)):
    removed = crud.clear_planner(db)
    return {"ok": True, "removed": removed}


@router.put("/{slot}", response_model=PlannedMealOut)
def plan_meal(slot: str, payload: PlanMealIn, db: Session = Depends(get_db)):
    if not crud.get_recipe(db, payload.recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    try:
        return crud.plan_meal(db, slot, payload.recipe_id)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.delete("/{slot}")
def remove_meal(slot: str, db: Session = Depends(get_db)):
    ok = crud.remove_planned_meal(db, slot)
    if not ok:
        raise HTTPException(status_code=404, detail="No meal planned for this slot")
    return {"ok": True}
