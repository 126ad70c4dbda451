"""Tests for the offline clue server."""

import pytest
from fastapi.testclient import TestClient

from jeopardy_app.constants.board_constants import CLUES_PER_CATEGORY, NUM_CATEGORIES
from jeopardy_app.core.api_schemas import CategoryPayload, CluePayload
from jeopardy_app.server.clue_server import create_clue_app, load_offline_categories


def _category(category_id: int, clue_count: int = 5) -> CategoryPayload:
    return CategoryPayload(
        id=category_id,
        title=f"category {category_id}",
        clues=[
            CluePayload(id=n, question=f"Q{n}", answer=f"A{n}", category_id=category_id)
            for n in range(clue_count)
        ],
    )


@pytest.fixture
def client():
    categories = [_category(n) for n in range(1, 11)]
    with TestClient(create_clue_app(categories)) as client:
        yield client


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "categories": 10}


def test_categories_respects_count(client):
    response = client.get("/api/categories", params={"count": 4})
    assert response.status_code == 200
    data = response.json()
    assert [entry["id"] for entry in data] == [1, 2, 3, 4]
    assert data[0] == {"id": 1, "title": "category 1", "clues_count": 5}


def test_categories_count_larger_than_pool(client):
    response = client.get("/api/categories", params={"count": 100})
    assert response.status_code == 200
    assert len(response.json()) == 10


@pytest.mark.parametrize("count", [0, -3, 101])
def test_categories_rejects_bad_count(client, count):
    response = client.get("/api/categories", params={"count": count})
    assert response.status_code == 422


def test_category_detail(client):
    response = client.get("/api/category", params={"id": 3})
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 3
    assert data["title"] == "category 3"
    assert len(data["clues"]) == 5
    assert data["clues"][0]["question"] == "Q0"


def test_unknown_category_is_404(client):
    response = client.get("/api/category", params={"id": 999})
    assert response.status_code == 404


def test_bundled_clue_set_can_fill_a_board():
    categories = load_offline_categories()
    assert len(categories) >= NUM_CATEGORIES
    assert len({category.id for category in categories}) == len(categories)
    for category in categories:
        usable = [
            clue for clue in category.clues
            if (clue.question or "").strip() and (clue.answer or "").strip()
        ]
        assert len(usable) >= CLUES_PER_CATEGORY, category.title
        assert category.clues_count == len(category.clues)
