from __future__ import annotations

import inspect
from pathlib import Path

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from superheroes.catalog import HeroCatalog
from superheroes.web_api.main import create_app

from hero_helpers import A_BOMB_STATS, ANT_MAN_STATS


@pytest.fixture
def client(catalog: HeroCatalog):
    with TestClient(create_app(catalog=catalog)) as test_client:
        yield test_client


def test_root_says_hello(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Save the World!"


def test_health(client: TestClient) -> None:
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/ready").json() == {"status": "ready", "heroes": 4}


def test_list_superheroes(client: TestClient) -> None:
    response = client.get("/api/superheroes")
    assert response.status_code == 200

    payload = response.json()
    assert [hero["name"] for hero in payload] == ["A-Bomb", "Ant-Man", "Abe Sapien", "Batman"]
    for hero in payload:
        assert set(hero) == {"id", "name", "image", "powerstats"}


def test_get_superhero_by_id(client: TestClient) -> None:
    response = client.get("/api/superheroes/1")
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert response.json()["name"] == "A-Bomb"


@pytest.mark.parametrize("hero_id", ["9999", "abc"])
def test_get_superhero_not_found(client: TestClient, hero_id: str) -> None:
    response = client.get(f"/api/superheroes/{hero_id}")
    assert response.status_code == 404
    assert response.text == "Superhero not found"


def test_get_powerstats(client: TestClient) -> None:
    response = client.get("/api/superheroes/2/powerstats")
    assert response.status_code == 200
    assert response.json() == ANT_MAN_STATS


def test_get_powerstats_not_found(client: TestClient) -> None:
    response = client.get("/api/superheroes/xyz/powerstats")
    assert response.status_code == 404
    assert response.text == "Superhero not found"


def test_search_ranks_exact_match_first(client: TestClient) -> None:
    response = client.get("/api/superheroes/search", params={"q": "a-bomb"})
    assert response.status_code == 200
    assert response.json()[0]["name"] == "A-Bomb"


def test_search_blank_query_returns_everything(client: TestClient) -> None:
    everything = client.get("/api/superheroes").json()
    assert client.get("/api/superheroes/search").json() == everything
    assert client.get("/api/superheroes/search", params={"q": "   "}).json() == everything


def test_search_with_pattern_characters(client: TestClient) -> None:
    response = client.get("/api/superheroes/search", params={"q": "(.*["})
    assert response.status_code == 200
    assert response.json() == []


def test_compare_returns_story(client: TestClient) -> None:
    response = client.post(
        "/api/superheroes/compare",
        json={
            "hero1": {"name": "A-Bomb", "powerstats": A_BOMB_STATS},
            "hero2": {"name": "Ant-Man", "powerstats": ANT_MAN_STATS},
        },
    )
    assert response.status_code == 200

    payload = response.json()
    story = payload["story"]
    assert isinstance(story, str)
    assert len(story) <= 800
    assert "A-Bomb" in story
    assert "Ant-Man" in story
    assert payload["head_to_head"]["overall_winner"] == "A-Bomb"
    assert payload["head_to_head"]["score"] == "3-3"


def test_compare_evenly_matched(client: TestClient) -> None:
    hero_a = {stat: 50 for stat in A_BOMB_STATS}
    hero_b = dict(hero_a, intelligence=55, strength=45)
    response = client.post(
        "/api/superheroes/compare",
        json={
            "hero1": {"name": "Hero A", "powerstats": hero_a},
            "hero2": {"name": "Hero B", "powerstats": hero_b},
        },
    )
    assert response.status_code == 200
    assert "evenly matched" in response.json()["story"]


@pytest.mark.parametrize(
    "body",
    [
        {"hero2": {"name": "Ant-Man", "powerstats": ANT_MAN_STATS}},
        {"hero1": {"name": "A-Bomb", "powerstats": A_BOMB_STATS}, "hero2": {"name": "Ant-Man"}},
        {
            "hero1": {"name": "", "powerstats": A_BOMB_STATS},
            "hero2": {"name": "Ant-Man", "powerstats": ANT_MAN_STATS},
        },
        [],
    ],
)
def test_compare_rejects_invalid_body(client: TestClient, body) -> None:
    response = client.post("/api/superheroes/compare", json=body)
    assert response.status_code == 400
    assert "Invalid request" in response.text


def test_compare_rejects_non_json_body(client: TestClient) -> None:
    response = client.post(
        "/api/superheroes/compare",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


def test_missing_dataset_is_internal_error(tmp_path: Path) -> None:
    app = create_app(catalog=HeroCatalog(data_file=tmp_path / "missing.json"))
    with TestClient(app) as client:
        response = client.get("/api/superheroes")
        assert response.status_code == 500
        assert response.text == "Internal Server Error"

        # Routes that don't need the dataset keep working
        assert client.get("/").status_code == 200


def test_dataset_routes_run_off_the_event_loop(catalog: HeroCatalog) -> None:
    app = create_app(catalog=catalog)
    dataset_paths = {
        "/ready",
        "/api/superheroes",
        "/api/superheroes/search",
        "/api/superheroes/{hero_id}",
        "/api/superheroes/{hero_id}/powerstats",
    }
    endpoints = {
        route.path: route.endpoint
        for route in app.routes
        if isinstance(route, APIRoute) and route.path in dataset_paths
    }

    assert set(endpoints) == dataset_paths
    for path, endpoint in endpoints.items():
        # Sync endpoints go to the threadpool, so the first file read doesn't block the loop
        assert not inspect.iscoroutinefunction(endpoint), path
