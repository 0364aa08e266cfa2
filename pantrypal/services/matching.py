from __future__ import annotations


def normalize_text(text) -> str:
    """Trim and case-fold a name for comparisons. ``None`` becomes ``""``."""
    return str(text or "").strip().casefold()


def matches(pantry_item_name, ingredient_name) -> bool:
    """Return True if a pantry item name satisfies an ingredient name.

    Equality or substring containment in either direction, after
    normalization. This over-matches on purpose ("egg" satisfies "eggplant"
    and vice versa) so that "tomato"/"tomatoes" or "onion"/"red onion" never
    produce a false "missing".

    Empty ingredient names are not special-cased here; callers skip them.
    """
    pantry_name = normalize_text(pantry_item_name)
    ingredient = normalize_text(ingredient_name)
    return pantry_name == ingredient or ingredient in pantry_name or pantry_name in ingredient
