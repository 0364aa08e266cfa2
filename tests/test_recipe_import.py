from pantrypal.services.ingredients import Ingredient
from pantrypal.services.recipe_import import UNTITLED, plan_import, recipe_from_json


def test_recipe_from_json_reads_aliases():
    recipe = recipe_from_json(
        {
            "title": "Shakshuka",
            "category": "Breakfast",
            "ingredients": [
                "4 eggs",
                {"ingredient": "tomatoes", "quantity": "400", "unit": "g"},
                {"name": "cumin", "amount": "1", "unit": "tsp"},
                {"name": ""},
                42,
            ],
            "directions": ["Simmer the sauce.", "Crack in the eggs."],
        }
    )
    assert recipe.name == "Shakshuka"
    assert recipe.category == "Breakfast"
    assert recipe.ingredients == [
        Ingredient(name="eggs", qty="4"),
        Ingredient(name="tomatoes", qty="400", unit="g"),
        Ingredient(name="cumin", qty="1", unit="tsp"),
    ]
    assert recipe.instructions == "Simmer the sauce.\n\nCrack in the eggs."


def test_recipe_from_json_defaults():
    recipe = recipe_from_json({"instructions": "Just eat it."})
    assert recipe.name == UNTITLED
    assert recipe.category == ""
    assert recipe.ingredients == []
    assert recipe.instructions == "Just eat it."


def test_list_instructions_take_precedence_over_string_directions():
    recipe = recipe_from_json({"name": "X", "directions": "string", "instructions": ["a", "b"]})
    assert recipe.instructions == "a\n\nb"


def test_plan_import_skips_existing_and_repeated_names():
    payload = [
        {"name": "Pancakes"},
        {"name": "Soup"},
        {"name": " soup "},
        "not a recipe",
    ]
    to_create, skipped = plan_import(payload, existing_names=["PANCAKES"])
    assert [r.name for r in to_create] == ["Soup"]
    assert skipped == 3


def test_plan_import_accepts_single_object():
    to_create, skipped = plan_import({"title": "Toast"}, existing_names=[])
    assert [r.name for r in to_create] == ["Toast"]
    assert skipped == 0
