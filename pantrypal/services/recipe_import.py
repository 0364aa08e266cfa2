from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from pantrypal.services.ingredients import Ingredient, parse_ingredient_line
from pantrypal.services.matching import normalize_text

UNTITLED = "Untitled Recipe"


@dataclass
class ImportedRecipe:
    name: str
    category: str = ""
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: str = ""


def join_instructions(value) -> str:
    if isinstance(value, (list, tuple)):
        return "\n\n".join(str(v) for v in value)
    if isinstance(value, str):
        return value
    return ""


def _ingredient_from_json(raw) -> Ingredient:
    if isinstance(raw, str):
        return parse_ingredient_line(raw) or Ingredient(name=raw)
    if isinstance(raw, Mapping):
        return Ingredient(
            name=str(raw.get("name") or raw.get("ingredient") or ""),
            qty=str(raw.get("qty") or raw.get("quantity") or raw.get("amount") or ""),
            unit=str(raw.get("unit") or ""),
        )
    return Ingredient()


def recipe_from_json(data: Mapping) -> ImportedRecipe:
    """Normalize one recipe object from a pasted JSON export.

    Reads ``title`` or ``name``, ``ingredients`` as strings or objects, and
    ``directions`` or ``instructions`` as a list or a string.
    """
    recipe = ImportedRecipe(
        name=str(data.get("title") or data.get("name") or UNTITLED).strip() or UNTITLED,
        category=str(data.get("category") or ""),
    )

    raw_ingredients = data.get("ingredients")
    if isinstance(raw_ingredients, list):
        parsed = (_ingredient_from_json(i) for i in raw_ingredients)
        recipe.ingredients = [i for i in parsed if i.name]

    for key in ("directions", "instructions"):
        if isinstance(data.get(key), list):
            recipe.instructions = join_instructions(data[key])
            break
    else:
        for key in ("directions", "instructions"):
            if isinstance(data.get(key), str):
                recipe.instructions = data[key]
                break
    return recipe


def plan_import(payload, existing_names) -> tuple[list[ImportedRecipe], int]:
    """Split a payload into recipes to create and a skipped count.

    ``payload`` is one recipe object or a list of them. Entries whose name
    already exists (in ``existing_names`` or earlier in the payload) are
    skipped, as are entries that are not objects.
    """
    entries = payload if isinstance(payload, list) else [payload]
    seen = {normalize_text(n) for n in existing_names}
    to_create: list[ImportedRecipe] = []
    skipped = 0
    for entry in entries:
        if not isinstance(entry, Mapping):
            skipped += 1
            continue
        recipe = recipe_from_json(entry)
        key = normalize_text(recipe.name)
        if key in seen:
            skipped += 1
            continue
        seen.add(key)
        to_create.append(recipe)
    return to_create, skipped
