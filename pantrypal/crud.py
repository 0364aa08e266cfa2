from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from pantrypal.models.pantry import PantryItem, ShoppingItem
from pantrypal.models.planner import PlannedMeal
from pantrypal.models.recipe import Recipe
from pantrypal.schemas.recipe import RecipeIn
from pantrypal.services import backup
from pantrypal.services.feasibility import missing_ingredients
from pantrypal.services.ingredients import Ingredient
from pantrypal.services.matching import normalize_text
from pantrypal.services.recipe_import import plan_import
from pantrypal.services.week import parse_slot_key

logger = logging.getLogger("pantrypal.crud")


class DuplicateNameError(ValueError):
    pass


def _find_by_name(items: Iterable, name: str, exclude_id: int | None = None):
    key = normalize_text(name)
    for item in items:
        if exclude_id is not None and item.id == exclude_id:
            continue
        if normalize_text(item.name) == key:
            return item
    return None


# ----------------------------
# Pantry
# ----------------------------
def list_pantry_items(db: Session) -> list[PantryItem]:
    return list(db.execute(select(PantryItem).order_by(PantryItem.id.asc())).scalars())


def get_pantry_item(db: Session, item_id: int) -> PantryItem | None:
    return db.get(PantryItem, item_id)


def create_pantry_item(db: Session, name: str, available: bool = True) -> PantryItem:
    name = name.strip()
    if _find_by_name(list_pantry_items(db), name):
        raise DuplicateNameError("This item already exists in your pantry")
    item = PantryItem(name=name, available=available)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_pantry_item(
    db: Session,
    item_id: int,
    *,
    name: str | None = None,
    available: bool | None = None,
) -> PantryItem | None:
    item = get_pantry_item(db, item_id)
    if not item:
        return None
    if name is not None:
        name = name.strip()
        if _find_by_name(list_pantry_items(db), name, exclude_id=item_id):
            raise DuplicateNameError("An item with this name already exists")
        item.name = name
    if available is not None:
        item.available = available
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def delete_pantry_item(db: Session, item_id: int) -> bool:
    item = get_pantry_item(db, item_id)
    if not item:
        return False
    db.delete(item)
    db.commit()
    return True


def import_pantry_lines(db: Session, text: str) -> tuple[int, int]:
    """Add one pantry item per non-blank line. Returns (imported, skipped)."""
    names = [line.strip() for line in (text or "").splitlines() if line.strip()]
    known = {normalize_text(p.name) for p in list_pantry_items(db)}
    imported = skipped = 0
    for name in names:
        key = normalize_text(name)
        if key in known:
            skipped += 1
            continue
        db.add(PantryItem(name=name, available=True))
        known.add(key)
        imported += 1
    db.commit()
    logger.info("Pantry import: imported=%s skipped=%s", imported, skipped)
    return imported, skipped


def add_pantry_item_to_shopping(db: Session, item_id: int) -> ShoppingItem | None:
    """Queue a pantry item for shopping. Returns the queued entry, existing or new."""
    item = get_pantry_item(db, item_id)
    if not item:
        return None
    existing = _find_by_name(list_shopping_items(db), item.name)
    if existing:
        return existing
    return create_shopping_item(db, item.name)


# ----------------------------
# Shopping
# ----------------------------
def list_shopping_items(db: Session) -> list[ShoppingItem]:
    return list(db.execute(select(ShoppingItem).order_by(ShoppingItem.id.asc())).scalars())


def create_shopping_item(db: Session, name: str) -> ShoppingItem:
    item = ShoppingItem(name=name.strip())
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def delete_shopping_item(db: Session, item_id: int) -> bool:
    item = db.get(ShoppingItem, item_id)
    if not item:
        return False
    db.delete(item)
    db.commit()
    return True


def clear_shopping(db: Session) -> int:
    count = len(list_shopping_items(db))
    db.execute(delete(ShoppingItem))
    db.commit()
    return count


def _restock(db: Session, pantry: list[PantryItem], name: str) -> None:
    item = _find_by_name(pantry, name)
    if item:
        item.available = True
        db.add(item)
        return
    item = PantryItem(name=name, available=True)
    db.add(item)
    pantry.append(item)


def mark_purchased(db: Session, item_id: int) -> PantryItem | None:
    """Move a shopping entry into the pantry as in stock."""
    entry = db.get(ShoppingItem, item_id)
    if not entry:
        return None
    name = entry.name
    _restock(db, list_pantry_items(db), name)
    db.delete(entry)
    db.commit()
    return _find_by_name(list_pantry_items(db), name)


def mark_all_purchased(db: Session) -> int:
    entries = list_shopping_items(db)
    if not entries:
        return 0
    pantry = list_pantry_items(db)
    for entry in entries:
        _restock(db, pantry, entry.name)
    db.execute(delete(ShoppingItem))
    db.commit()
    logger.info("Marked %s shopping items as purchased", len(entries))
    return len(entries)


# ----------------------------
# Recipes
# ----------------------------
def list_recipes(db: Session) -> list[Recipe]:
    return list(db.execute(select(Recipe).order_by(Recipe.id.asc())).scalars())


def get_recipe(db: Session, recipe_id: int) -> Recipe | None:
    return db.get(Recipe, recipe_id)


def _ingredient_dicts(ingredients: Iterable) -> list[dict]:
    return [Ingredient.coerce(i).to_dict() for i in ingredients]


def create_recipe(db: Session, data: RecipeIn) -> Recipe:
    recipe = Recipe(
        name=data.name,
        category=data.category,
        ingredients=_ingredient_dicts(data.ingredients),
        instructions=data.instructions,
    )
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


def update_recipe(db: Session, recipe_id: int, data: RecipeIn) -> Recipe | None:
    recipe = get_recipe(db, recipe_id)
    if not recipe:
        return None
    recipe.name = data.name
    recipe.category = data.category
    recipe.ingredients = _ingredient_dicts(data.ingredients)
    recipe.instructions = data.instructions
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


def delete_recipe(db: Session, recipe_id: int) -> bool:
    recipe = get_recipe(db, recipe_id)
    if not recipe:
        return False
    db.delete(recipe)
    db.commit()
    return True


def import_recipes(db: Session, payload) -> tuple[int, int]:
    existing = [r.name for r in list_recipes(db)]
    to_create, skipped = plan_import(payload, existing)
    for item in to_create:
        db.add(
            Recipe(
                name=item.name,
                category=item.category,
                ingredients=_ingredient_dicts(item.ingredients),
                instructions=item.instructions,
            )
        )
    db.commit()
    logger.info("Recipe import: imported=%s skipped=%s", len(to_create), skipped)
    return len(to_create), skipped


def add_missing_to_shopping(db: Session, recipe_id: int) -> list[ShoppingItem] | None:
    recipe = get_recipe(db, recipe_id)
    if not recipe:
        return None
    missing = missing_ingredients(recipe, list_pantry_items(db), list_shopping_items(db))
    added = [ShoppingItem(name=i.name) for i in missing]
    db.add_all(added)
    db.commit()
    for item in added:
        db.refresh(item)
    logger.info("Recipe %s: queued %s missing ingredients", recipe_id, len(added))
    return added


# ----------------------------
# Planner
# ----------------------------
def list_planned_meals(db: Session) -> list[PlannedMeal]:
    return list(db.execute(select(PlannedMeal).order_by(PlannedMeal.slot.asc())).scalars())


def plan_meal(db: Session, slot: str, recipe_id: int) -> PlannedMeal:
    parse_slot_key(slot)
    meal = db.get(PlannedMeal, slot)
    if meal:
        meal.recipe_id = recipe_id
    else:
        meal = PlannedMeal(slot=slot, recipe_id=recipe_id)
    db.add(meal)
    db.commit()
    db.refresh(meal)
    return meal


def remove_planned_meal(db: Session, slot: str) -> bool:
    meal = db.get(PlannedMeal, slot)
    if not meal:
        return False
    db.delete(meal)
    db.commit()
    return True


def clear_planner(db: Session) -> int:
    count = len(list_planned_meals(db))
    db.execute(delete(PlannedMeal))
    db.commit()
    return count


# ----------------------------
# Backup
# ----------------------------
def export_all(db: Session) -> dict:
    return backup.build_export(
        list_pantry_items(db),
        list_recipes(db),
        list_shopping_items(db),
        list_planned_meals(db),
    )


def import_all(db: Session, data) -> dict:
    """Replace every store with the contents of an exported document."""
    contents = backup.parse_backup(data)

    for model in (PantryItem, Recipe, ShoppingItem, PlannedMeal):
        db.execute(delete(model))

    db.add_all(PantryItem(**p) for p in contents.pantry)
    db.add_all(ShoppingItem(**s) for s in contents.shopping)

    id_map = {}
    for fields in contents.recipes:
        old_id = fields.pop("old_id")
        recipe = Recipe(**fields)
        db.add(recipe)
        db.flush()
        if old_id is not None:
            id_map[old_id] = recipe.id

    # 0 never names a recipe, so unmatched references read as deleted.
    for plan in contents.planner:
        db.add(PlannedMeal(slot=plan["slot"], recipe_id=id_map.get(plan["recipe_id"], 0)))

    db.commit()
    counts = {
        "pantry": len(contents.pantry),
        "recipes": len(contents.recipes),
        "shopping": len(contents.shopping),
        "planner": len(contents.planner),
    }
    logger.info("Backup restored: %s", counts)
    return counts
