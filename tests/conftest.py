"""Shared fixtures for the JeopardyQt test suite."""

from __future__ import annotations

import random

import pytest

from jeopardy_app.core.models import CategoryDetail, RawClue, SessionState
from jeopardy_app.core.random_sampler import RandomSampler


def make_detail(category_id: int, clue_count: int = 5, title: str | None = None) -> CategoryDetail:
    """Category detail with numbered, easily recognisable clues."""
    return CategoryDetail(
        id=category_id,
        title=title if title is not None else f"Category {category_id}",
        raw_clues=[
            RawClue(question=f"Q{category_id}-{n}", answer=f"A{category_id}-{n}")
            for n in range(clue_count)
        ],
    )


class FakeCategorySource:
    """In-memory category service; ids listed in ``failing_ids`` raise on fetch."""

    def __init__(self, details: list[CategoryDetail], failing_ids: set[int] | None = None) -> None:
        self.details = {detail.id: detail for detail in details}
        self.failing_ids = set(failing_ids or ())
        self.pool_requests: list[int] = []
        self.detail_requests: list[int] = []

    async def fetch_category_ids(self, pool_size: int) -> list[int]:
        self.pool_requests.append(pool_size)
        return list(self.details)[:pool_size]

    async def fetch_category_detail(self, category_id: int) -> CategoryDetail:
        self.detail_requests.append(category_id)
        if category_id in self.failing_ids:
            raise ConnectionError(f"category {category_id} unavailable")
        return self.details[category_id]


class RecordingPresenter:
    """Presenter that remembers every callback it receives."""

    def __init__(self) -> None:
        self.states: list[SessionState] = []
        self.errors: list[object] = []
        self.rendered: list[object] = []

    def on_session_state_changed(self, state, error) -> None:
        self.states.append(state)
        self.errors.append(error)

    def render(self, category_set) -> None:
        self.rendered.append(category_set)


@pytest.fixture
def sampler() -> RandomSampler:
    return RandomSampler(random.Random(1234))


@pytest.fixture
def six_details() -> list[CategoryDetail]:
    return [make_detail(category_id, clue_count=7) for category_id in range(1, 7)]


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
