import pytest

from pantrypal import crud
from pantrypal.schemas.recipe import RecipeIn
from pantrypal.services.backup import parse_backup


def test_export_contains_every_store(client):
    client.post("/pantry", json={"name": "Flour"})
    client.post("/shopping", json={"name": "Eggs"})
    recipe = client.post("/recipes", json={"name": "Bread", "ingredients": [{"name": "flour"}]}).json()
    client.put("/planner/2026-01-05_Lunch", json={"recipe_id": recipe["id"]})

    data = client.get("/backup").json()
    assert set(data) == {"pantry", "recipes", "shopping", "planner", "exported"}
    assert data["pantry"][0]["name"] == "Flour"
    assert data["recipes"][0]["ingredients"] == [{"name": "flour", "qty": "", "unit": ""}]
    assert data["planner"] == [{"slot": "2026-01-05_Lunch", "recipe_id": recipe["id"]}]


def test_import_replaces_everything_and_remaps_planner(session_factory):
    with session_factory() as db:
        crud.create_pantry_item(db, "Old item")
        crud.create_recipe(db, RecipeIn(name="Old recipe"))

        counts = crud.import_all(
            db,
            {
                "pantry": [{"id": 7, "name": "Rice", "available": True}, {"name": "Beans"}],
                "recipes": [
                    {"id": 40, "name": "Rice bowl", "ingredients": [{"name": "rice"}], "instructions": ["a", "b"]},
                ],
                "shopping": [{"id": 3, "name": "Limes"}, "junk"],
                "planner": [{"slot": "2026-01-05_Dinner", "recipeId": 40}],
            },
        )
        assert counts == {"pantry": 2, "recipes": 1, "shopping": 1, "planner": 1}

        pantry = {p.name: p.available for p in crud.list_pantry_items(db)}
        assert pantry == {"Rice": True, "Beans": False}

        recipes = crud.list_recipes(db)
        assert [r.name for r in recipes] == ["Rice bowl"]
        assert recipes[0].instructions == "a\n\nb"

        planned = crud.list_planned_meals(db)
        assert planned[0].recipe_id == recipes[0].id


def test_import_rejects_non_object(client):
    resp = client.post("/backup", json=[1, 2, 3])
    assert resp.status_code == 422


def test_parse_backup_ignores_bad_sections():
    contents = parse_backup({"pantry": "nope", "planner": [{"slot": "x"}, {"slot": "y", "recipe_id": "z"}]})
    assert contents.pantry == []
    assert contents.planner == []

    with pytest.raises(ValueError):
        parse_backup("not json object")


def test_backup_round_trip_over_api(client):
    client.post("/pantry", json={"name": "Tea"})
    exported = client.get("/backup").json()
    client.post("/pantry", json={"name": "Coffee"})

    resp = client.post("/backup", json=exported)
    assert resp.status_code == 200
    assert [i["name"] for i in client.get("/pantry").json()] == ["Tea"]


def test_import_does_not_resolve_dangling_plans_to_new_recipes(client):
    data = {
        "recipes": [{"id": 10, "name": "Stew"}],
        "planner": [{"slot": "2026-01-05_Lunch", "recipe_id": 1}],
    }
    assert client.post("/backup", json=data).status_code == 200

    week = client.get("/planner/week", params={"date": "2026-01-05"}).json()
    lunch = week["days"][0]["slots"][1]
    assert lunch["recipe_id"] == 0
    assert lunch["recipe_name"] == "Deleted recipe"
