import os

DEFAULTS = [
    {"id": "latte", "name": "Latte", "description": ""},
    {"id": "americano", "name": "Americano", "description": "Espresso, no milk, water added"},
    {"id": "espresso-shot", "name": "Espresso Shot", "description": ""},
]


def test_first_read_seeds_defaults(client, read_json, settings):
    response = client.get("/api/drink-choices")
    assert response.status_code == 200
    assert response.json() == DEFAULTS
    assert read_json(settings.drink_choices_path) == DEFAULTS


def test_create_choice_appends_with_derived_id(client):
    client.get("/api/drink-choices")

    response = client.post("/api/drink-choices", json={"name": "Cold Brew"})
    assert response.status_code == 200
    assert response.json() == {"id": "cold-brew", "name": "Cold Brew"}

    choices = client.get("/api/drink-choices").json()
    assert choices == DEFAULTS + [{"id": "cold-brew", "name": "Cold Brew"}]


def test_create_choice_on_empty_store_keeps_defaults(client):
    client.post("/api/drink-choices", json={"name": "Mocha", "description": "Chocolate"})
    ids = [c["id"] for c in client.get("/api/drink-choices").json()]
    assert ids == ["latte", "americano", "espresso-shot", "mocha"]


def test_create_choice_accepts_new_drink_envelope(client):
    response = client.post(
        "/api/drink-choices",
        json={"newDrink": {"name": "Flat White", "description": "Microfoam"}},
    )
    assert response.status_code == 200
    assert response.json() == {"id": "flat-white", "name": "Flat White", "description": "Microfoam"}


def test_duplicate_names_derive_the_same_id(client):
    first = client.post("/api/drink-choices", json={"name": "Iced Latte"}).json()
    second = client.post("/api/drink-choices", json={"name": "Iced Latte"}).json()

    assert first["id"] == second["id"] == "iced-latte"
    ids = [c["id"] for c in client.get("/api/drink-choices").json()]
    assert ids.count("iced-latte") == 2


def test_create_choice_requires_name(client):
    response = client.post("/api/drink-choices", json={"description": "No name"})
    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}


def test_create_choice_without_body_fails_the_operation(client):
    response = client.post("/api/drink-choices")
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to create drink choice"


def test_delete_choice(client):
    client.get("/api/drink-choices")

    response = client.delete("/api/drink-choices", params={"id": "americano"})
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert [c["id"] for c in client.get("/api/drink-choices").json()] == ["latte", "espresso-shot"]


def test_delete_unknown_choice_leaves_collection_unchanged(client, read_json, settings):
    client.get("/api/drink-choices")

    response = client.delete("/api/drink-choices", params={"id": "unicorn-frappe"})
    assert response.status_code == 404
    assert response.json() == {"error": "Choice not found"}
    assert read_json(settings.drink_choices_path) == DEFAULTS


def test_delete_choice_without_id_is_bad_request(client, settings):
    response = client.delete("/api/drink-choices")
    assert response.status_code == 400
    assert response.json() == {"error": "Choice ID required"}
    assert not os.path.exists(settings.drink_choices_path)


def test_orders_are_not_validated_against_choices(client):
    response = client.post("/api/orders", json={"name": "Ana", "caffeine": "decaf", "drinkType": "unlisted"})
    assert response.status_code == 200
    assert response.json()["drinkType"] == "unlisted"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_choice_with_non_object_body_requires_name(client):
    response = client.post("/api/drink-choices", json=["Mocha"])
    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}


def test_create_choice_passes_description_through(client):
    response = client.post("/api/drink-choices", json={"name": "Mocha", "description": 3})
    assert response.status_code == 200
    assert response.json() == {"id": "mocha", "name": "Mocha", "description": 3}


def test_unparseable_choice_body_fails_the_operation(client):
    response = client.post(
        "/api/drink-choices",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to create drink choice"


def test_unwritable_choice_document_reports_internal_error(client, settings):
    os.makedirs(settings.drink_choices_path)

    response = client.get("/api/drink-choices")
    assert response.status_code == 500
    assert response.json()["error"] == "Failed to read drink choices"
