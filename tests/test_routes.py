from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from conftest import PANNKAKOR
from filedrecipes.cmd.server import create_app
from filedrecipes.config import Settings


@pytest.fixture
def client(recipe_file: Path) -> TestClient:
    app = create_app(Settings(recipes_path=recipe_file))
    return TestClient(app)


def test_list_recipes(client: TestClient):
    response = client.get("/recipes")

    assert response.status_code == 200
    recipes = response.json()["recipes"]
    assert len(recipes) == 1
    assert recipes[0]["name"] == "Pannkakor"
    assert recipes[0]["ingredients"][1] == {
        "amount": "2",
        "measure": "st",
        "name": "ägg",
    }
    assert recipes[0]["instructions"] == ["Blanda allt.", "Stek i smör."]


def test_get_recipe(client: TestClient):
    response = client.get("/recipes/0")

    assert response.status_code == 200
    assert response.json()["name"] == "Pannkakor"


def test_get_recipe_not_found(client: TestClient):
    response = client.get("/recipes/7")

    assert response.status_code == 404


def test_get_recipe_text(client: TestClient):
    response = client.get("/recipes/0/text")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "3 dl mjölk" in response.text
    assert "<2>\nStek i smör." in response.text


def test_create_recipe(client: TestClient, recipe_file: Path):
    body = {
        "name": "Gröt",
        "ingredients": [{"amount": "1", "measure": "dl", "name": "havregryn"}],
        "instructions": ["Koka."],
    }

    response = client.post("/recipes", json=body)

    assert response.status_code == 201
    assert response.json() == body
    assert client.get("/recipes/1").json()["name"] == "Gröt"
    assert recipe_file.read_text(encoding="utf-8").endswith(
        "[Recept]\nGröt\n[Ingredienser]\n1;dl;havregryn\n[Instruktioner]\nKoka.\n"
    )
    assert client.get("/status").json()["is_modified"] is True


def test_create_recipe_with_separator_in_field(
    client: TestClient, recipe_file: Path
):
    body = {"name": "Gröt", "ingredients": [{"name": "havre;gryn"}]}

    response = client.post("/recipes", json=body)

    assert response.status_code == 422
    assert recipe_file.read_text(encoding="utf-8") == PANNKAKOR
    assert len(client.get("/recipes").json()["recipes"]) == 1


def test_create_recipe_without_name(client: TestClient):
    response = client.post("/recipes", json={"name": ""})

    assert response.status_code == 422


def test_delete_recipe(client: TestClient):
    response = client.delete("/recipes/0")

    assert response.status_code == 204
    assert client.get("/recipes").json() == {"recipes": []}


def test_delete_recipe_not_found(client: TestClient):
    response = client.delete("/recipes/1")

    assert response.status_code == 404


def test_reload(client: TestClient, recipe_file: Path):
    client.delete("/recipes/0")

    response = client.post("/recipes/reload")

    assert response.status_code == 200
    assert response.json() == {
        "path": str(recipe_file.resolve()),
        "count": 1,
        "is_modified": False,
    }


def test_reload_malformed_file(client: TestClient, recipe_file: Path):
    recipe_file.write_text("Pannkakor\n", encoding="utf-8")

    response = client.post("/recipes/reload")

    assert response.status_code == 500
    assert client.get("/status").json()["count"] == 1


def test_missing_file_starts_empty(tmp_path: Path):
    app = create_app(Settings(recipes_path=tmp_path / "missing.txt"))
    client = TestClient(app)

    assert client.get("/recipes").json() == {"recipes": []}


def test_malformed_file_starts_empty_and_reload_recovers(recipe_file: Path):
    recipe_file.write_text("Pannkakor\n", encoding="utf-8")
    client = TestClient(create_app(Settings(recipes_path=recipe_file)))

    assert client.get("/recipes").json() == {"recipes": []}

    recipe_file.write_text(PANNKAKOR, encoding="utf-8")
    response = client.post("/recipes/reload")

    assert response.status_code == 200
    assert response.json()["count"] == 1


def test_create_recipe_notifies_once(client: TestClient):
    calls = []
    client.app.state.repository.subscribe(lambda: calls.append(1))

    client.post("/recipes", json={"name": "Gröt", "instructions": ["Koka."]})

    assert calls == [1]


def test_list_recipes_text(client: TestClient):
    client.post("/recipes", json={"name": "Gröt", "instructions": ["Koka."]})

    response = client.get("/recipes/text")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "  Pannkakor\n" in response.text
    assert "  Gröt\n" in response.text
