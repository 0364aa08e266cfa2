def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_create_and_list_pantry(client):
    resp = client.post("/pantry", json={"name": "  Flour "})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Flour"
    assert resp.json()["available"] is True

    client.post("/pantry", json={"name": "apples", "available": False})
    client.post("/pantry", json={"name": "Butter"})

    names = [i["name"] for i in client.get("/pantry").json()]
    assert names == ["apples", "Butter", "Flour"]

    by_stock = [i["name"] for i in client.get("/pantry", params={"sort": "available"}).json()]
    assert by_stock == ["Butter", "Flour", "apples"]

    found = client.get("/pantry", params={"search": "UTT"}).json()
    assert [i["name"] for i in found] == ["Butter"]


def test_pantry_rejects_duplicate_names(client):
    assert client.post("/pantry", json={"name": "Milk"}).status_code == 200
    resp = client.post("/pantry", json={"name": " milk "})
    assert resp.status_code == 409


def test_pantry_rejects_blank_name(client):
    assert client.post("/pantry", json={"name": "   "}).status_code == 422


def test_rename_and_toggle(client):
    milk = client.post("/pantry", json={"name": "Milk"}).json()
    eggs = client.post("/pantry", json={"name": "Eggs"}).json()

    resp = client.patch(f"/pantry/{eggs['id']}", json={"name": "MILK"})
    assert resp.status_code == 409

    resp = client.patch(f"/pantry/{milk['id']}", json={"name": "Oat milk", "available": False})
    assert resp.status_code == 200
    assert resp.json() == {"id": milk["id"], "name": "Oat milk", "available": False, "in_shopping": False}

    assert client.patch("/pantry/999", json={"available": True}).status_code == 404


def test_delete_pantry_item(client):
    item = client.post("/pantry", json={"name": "Rice"}).json()
    assert client.delete(f"/pantry/{item['id']}").status_code == 200
    assert client.delete(f"/pantry/{item['id']}").status_code == 404
    assert client.get("/pantry").json() == []


def test_import_pantry_lines(client):
    client.post("/pantry", json={"name": "Salt"})
    resp = client.post("/pantry/import", json={"text": "salt\n\nPepper\n  pepper \nOlive oil\n"})
    assert resp.status_code == 200
    assert resp.json() == {"imported": 2, "skipped": 2}
    names = sorted(i["name"] for i in client.get("/pantry").json())
    assert names == ["Olive oil", "Pepper", "Salt"]


def test_pantry_item_to_shopping_once(client):
    item = client.post("/pantry", json={"name": "Coffee"}).json()
    first = client.post(f"/pantry/{item['id']}/shop")
    second = client.post(f"/pantry/{item['id']}/shop")
    assert first.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    assert len(client.get("/shopping").json()) == 1

    listed = client.get("/pantry").json()
    assert listed[0]["in_shopping"] is True

    assert client.post("/pantry/999/shop").status_code == 404


def test_unknown_sort_is_rejected(client):
    assert client.get("/pantry", params={"sort": "random"}).status_code == 422
