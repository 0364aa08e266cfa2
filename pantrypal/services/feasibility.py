"""Recipe feasibility against a pantry snapshot.

Every function here is pure: it reads the snapshots it is given (ORM rows,
pydantic models or plain dicts), never mutates them, never touches the
database and never raises on malformed input. A missing ingredient name is
treated as satisfied, a missing ``available`` flag as out of stock.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from pantrypal.services.ingredients import Ingredient, read_field
from pantrypal.services.matching import matches, normalize_text


@dataclass(frozen=True)
class IngredientStatus:
    name: str
    qty: str
    unit: str
    available: bool
    matched: str | None = None


@dataclass(frozen=True)
class PickerEntry:
    recipe: Any
    can_make: bool


def _ingredients(recipe) -> list[Ingredient]:
    raw = read_field(recipe, "ingredients")
    if not isinstance(raw, (list, tuple)):
        return []
    return [Ingredient.coerce(i) for i in raw]


def _name_key(record) -> str:
    return normalize_text(read_field(record, "name"))


def find_match(ingredient_name, pantry: Iterable) -> Any | None:
    """First in-stock pantry item that satisfies ``ingredient_name``, or None."""
    for item in pantry or ():
        if not read_field(item, "available", False):
            continue
        if matches(read_field(item, "name"), ingredient_name):
            return item
    return None


def can_make(recipe, pantry: Iterable) -> bool:
    pantry = list(pantry or ())
    for ingredient in _ingredients(recipe):
        if not normalize_text(ingredient.name):
            continue
        if find_match(ingredient.name, pantry) is None:
            return False
    return True


def ingredient_status(recipe, pantry: Iterable) -> list[IngredientStatus]:
    """Per-ingredient availability, in recipe order. Does not short-circuit."""
    pantry = list(pantry or ())
    out: list[IngredientStatus] = []
    for ingredient in _ingredients(recipe):
        matched = None
        if normalize_text(ingredient.name):
            item = find_match(ingredient.name, pantry)
            available = item is not None
            if item is not None:
                matched = str(read_field(item, "name") or "")
        else:
            available = True
        out.append(
            IngredientStatus(
                name=ingredient.name,
                qty=ingredient.qty,
                unit=ingredient.unit,
                available=available,
                matched=matched,
            )
        )
    return out


def missing_ingredients(recipe, pantry: Iterable, shopping: Iterable) -> list[Ingredient]:
    """Ingredients to queue for shopping.

    An ingredient qualifies when no in-stock pantry item matches it and no
    shopping entry has exactly the same normalized name. The shopping check
    is exact on purpose, so "red onion" is still added when "onion" is
    already queued.
    """
    pantry = list(pantry or ())
    queued = {_name_key(s) for s in shopping or ()}
    out: list[Ingredient] = []
    for ingredient in _ingredients(recipe):
        key = normalize_text(ingredient.name)
        if not key or key in queued:
            continue
        if find_match(ingredient.name, pantry) is not None:
            continue
        queued.add(key)
        out.append(ingredient)
    return out


def sort_for_picker(recipes: Iterable, pantry: Iterable, search: str = "") -> list[PickerEntry]:
    """Recipes for the meal planner picker: makeable first, then the rest.

    Each group is alphabetical by name.
    """
    pantry = list(pantry or ())
    term = normalize_text(search)
    makeable: list[PickerEntry] = []
    other: list[PickerEntry] = []
    for recipe in recipes or ():
        if term and term not in _name_key(recipe):
            continue
        if can_make(recipe, pantry):
            makeable.append(PickerEntry(recipe=recipe, can_make=True))
        else:
            other.append(PickerEntry(recipe=recipe, can_make=False))

    makeable.sort(key=lambda e: _name_key(e.recipe))
    other.sort(key=lambda e: _name_key(e.recipe))
    return makeable + other


def filter_recipes(
    recipes: Iterable,
    pantry: Iterable,
    search: str = "",
    only_available: bool = False,
) -> list:
    pantry = list(pantry or ())
    term = normalize_text(search)
    out = []
    for recipe in recipes or ():
        if term:
            name_hit = term in _name_key(recipe)
            ing_hit = any(term in normalize_text(i.name) for i in _ingredients(recipe))
            if not (name_hit or ing_hit):
                continue
        if only_available and not can_make(recipe, pantry):
            continue
        out.append(recipe)
    out.sort(key=_name_key)
    return out
