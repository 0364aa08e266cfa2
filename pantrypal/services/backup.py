from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field

from pantrypal.services.ingredients import Ingredient
from pantrypal.services.recipe_import import join_instructions


@dataclass
class BackupContents:
    pantry: list[dict] = field(default_factory=list)
    recipes: list[dict] = field(default_factory=list)
    shopping: list[dict] = field(default_factory=list)
    planner: list[dict] = field(default_factory=list)


def _pantry_out(item) -> dict:
    return {"id": item.id, "name": item.name, "available": bool(item.available)}


def _recipe_out(recipe) -> dict:
    return {
        "id": recipe.id,
        "name": recipe.name,
        "category": recipe.category or "",
        "ingredients": [Ingredient.coerce(i).to_dict() for i in recipe.ingredients or []],
        "instructions": recipe.instructions or "",
        "created": recipe.created.isoformat() if recipe.created else None,
    }


def build_export(pantry, recipes, shopping, planner, now: dt.datetime | None = None) -> dict:
    now = now or dt.datetime.utcnow()
    return {
        "pantry": [_pantry_out(p) for p in pantry],
        "recipes": [_recipe_out(r) for r in recipes],
        "shopping": [{"id": s.id, "name": s.name} for s in shopping],
        "planner": [{"slot": p.slot, "recipe_id": p.recipe_id} for p in planner],
        "exported": now.isoformat(),
    }


def _parse_created(value) -> dt.datetime:
    if isinstance(value, str) and value:
        try:
            parsed = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return dt.datetime.utcnow()
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(dt.timezone.utc).replace(tzinfo=None)
        return parsed
    return dt.datetime.utcnow()


def _records(data: Mapping, key: str) -> list[Mapping]:
    section = data.get(key)
    if not isinstance(section, list):
        return []
    return [r for r in section if isinstance(r, Mapping)]


def parse_backup(data) -> BackupContents:
    """Validate an exported document and strip store-assigned ids.

    Sections that are missing or not lists are treated as empty. Planner
    rows keep their slot keys; ``recipeId`` is accepted as an alias of
    ``recipe_id`` for older exports.
    """
    if not isinstance(data, Mapping):
        raise ValueError("backup must be a JSON object")

    contents = BackupContents()
    for item in _records(data, "pantry"):
        name = str(item.get("name") or "").strip()
        if name:
            contents.pantry.append({"name": name, "available": bool(item.get("available"))})

    for recipe in _records(data, "recipes"):
        name = str(recipe.get("name") or "").strip()
        if not name:
            continue
        ingredients = recipe.get("ingredients")
        contents.recipes.append(
            {
                "old_id": recipe.get("id"),
                "name": name,
                "category": str(recipe.get("category") or ""),
                "ingredients": [
                    Ingredient.coerce(i).to_dict()
                    for i in (ingredients if isinstance(ingredients, list) else [])
                ],
                "instructions": join_instructions(recipe.get("instructions")),
                "created": _parse_created(recipe.get("created")),
            }
        )

    for item in _records(data, "shopping"):
        name = str(item.get("name") or "").strip()
        if name:
            contents.shopping.append({"name": name})

    planner: dict[str, int] = {}
    for plan in _records(data, "planner"):
        slot = plan.get("slot")
        recipe_id = plan.get("recipe_id", plan.get("recipeId"))
        if not slot or recipe_id is None:
            continue
        try:
            recipe_id = int(recipe_id)
        except (TypeError, ValueError):
            continue
        planner[str(slot)] = recipe_id
    contents.planner = [{"slot": s, "recipe_id": r} for s, r in planner.items()]

    return contents
