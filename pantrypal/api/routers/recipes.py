from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from pantrypal.db import get_db
from pantrypal.schemas.pantry import ImportResult, ShoppingItemOut
from pantrypal.schemas.recipe import (
    IngredientStatusOut,
    RecipeDetailOut,
    RecipeIn,
    RecipeOut,
    RecipeSummaryOut,
    ShopMissingOut,
)
from pantrypal.services.feasibility import can_make, filter_recipes, ingredient_status
from pantrypal.services.ingredients import format_ingredient_line
from pantrypal import crud

router = APIRouter(prefix="/recipes", tags=["recipes"])

RECIPE_FILTERS = {"all", "available"}


def _detail(recipe, pantry) -> RecipeDetailOut:
    base = RecipeOut.model_validate(recipe)
    return RecipeDetailOut(
        **base.model_dump(),
        can_make=can_make(recipe, pantry),
        ingredient_status=[IngredientStatusOut.model_validate(asdict(s)) for s in ingredient_status(recipe, pantry)],
        ingredients_text="\n".join(format_ingredient_line(i) for i in recipe.ingredients or []),
    )


@router.get("", response_model=list[RecipeSummaryOut])
def list_recipes(
    search: str = Query(default=""),
    filter: str = Query(default="all", description="all|available"),
    db: Session = Depends(get_db),
):
    if filter not in RECIPE_FILTERS:
        raise HTTPException(status_code=422, detail=f"filter must be one of: {sorted(RECIPE_FILTERS)}")
    pantry = crud.list_pantry_items(db)
    recipes = filter_recipes(
        crud.list_recipes(db),
        pantry,
        search=search,
        only_available=filter == "available",
    )
    return [
        RecipeSummaryOut(
            id=r.id,
            name=r.name,
            category=r.category or "",
            can_make=can_make(r, pantry),
        )
        for r in recipes
    ]


@router.post("", response_model=RecipeDetailOut)
def create_recipe(payload: RecipeIn, db: Session = Depends(get_db)):
    recipe = crud.create_recipe(db, payload)
    return _detail(recipe, crud.list_pantry_items(db))


@router.post("/import", response_model=ImportResult)
def import_recipes(payload: dict[str, Any] | list[Any] = Body(...), db: Session = Depends(get_db)):
    imported, skipped = crud.import_recipes(db, payload)
    return ImportResult(imported=imported, skipped=skipped)


@router.get("/{recipe_id}", response_model=RecipeDetailOut)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    recipe = crud.get_recipe(db, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return _detail(recipe, crud.list_pantry_items(db))


@router.put("/{recipe_id}", response_model=RecipeDetailOut)
def update_recipe(recipe_id: int, payload: RecipeIn, db: Session = Depends(get_db)):
    recipe = crud.update_recipe(db, recipe_id, payload)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return _detail(recipe, crud.list_pantry_items(db))


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: int, db: Session = Depends(get_db)):
    ok = crud.delete_recipe(db, recipe_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"ok": True}


@router.post("/{recipe_id}/shop-missing", response_model=ShopMissingOut)
def shop_missing(recipe_id: int, db: Session = Depends(get_db)):
    added = crud.add_missing_to_shopping(db, recipe_id)
    if added is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return ShopMissingOut(added=len(added), items=[ShoppingItemOut.model_validate(i) for i in added])
