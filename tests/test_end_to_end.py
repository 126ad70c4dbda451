"""Full games played against the offline clue server over HTTP."""

import asyncio
import random

import httpx

from conftest import RecordingPresenter
from jeopardy_app.core.models import RevealState, SessionState
from jeopardy_app.core.random_sampler import RandomSampler
from jeopardy_app.core.services.category_client import JeopardyApiClient
from jeopardy_app.core.services.game_session import GameSessionController
from jeopardy_app.server.clue_server import create_clue_app, load_offline_categories


def _controller(presenter, app=None) -> GameSessionController:
    transport = httpx.ASGITransport(app=app or create_clue_app())
    client = JeopardyApiClient("http://testserver/api", transport=transport, retry_wait_seconds=0)
    return GameSessionController(client, presenter, sampler=RandomSampler(random.Random(3)))


def test_game_loads_from_offline_server():
    presenter = RecordingPresenter()
    controller = _controller(presenter)

    assert asyncio.run(controller.start_or_restart()) is True

    board = controller.category_set
    offline_titles = {category.title for category in load_offline_categories()}
    assert controller.state is SessionState.READY
    assert board.num_categories == 6
    assert board.clues_per_category == 5
    assert set(board.titles) <= offline_titles
    assert all(clue.reveal_state is RevealState.HIDDEN for clue in board.all_clues())
    assert all(clue.question and clue.answer for clue in board.all_clues())
    assert presenter.states == [SessionState.LOADING, SessionState.READY]


def test_reveal_and_restart_over_http():
    controller = _controller(RecordingPresenter())
    asyncio.run(controller.start_or_restart())
    clue = controller.category_set.clue_at(2, 3)

    assert controller.on_cell_activated(2, 3) == clue.question
    assert controller.on_cell_activated(2, 3) == clue.answer
    assert controller.on_cell_activated(2, 3) == clue.answer

    asyncio.run(controller.start_or_restart())
    assert all(
        clue.reveal_state is RevealState.HIDDEN for clue in controller.category_set.all_clues()
    )


def test_missing_category_fails_the_game():
    categories = load_offline_categories()
    app = create_clue_app(categories)
    # Advertise an id the server cannot serve.
    categories[0].id = 424242
    presenter = RecordingPresenter()
    controller = GameSessionController(
        JeopardyApiClient(
            "http://testserver/api",
            transport=httpx.ASGITransport(app=app),
            retry_wait_seconds=0,
        ),
        presenter,
        num_categories=len(categories),
    )

    asyncio.run(controller.start_or_restart())

    assert controller.state is SessionState.FAILED
    assert controller.category_set is None
    assert presenter.rendered == []


class _FirstPoolRequestTimesOut(httpx.AsyncBaseTransport):
    """Serves the clue app, but the first pool request stalls and times out."""

    def __init__(self, stall_seconds: float) -> None:
        self._inner = httpx.ASGITransport(app=create_clue_app())
        self._stall_seconds = stall_seconds
        self.pool_requests = 0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/categories"):
            self.pool_requests += 1
            if self.pool_requests == 1:
                await asyncio.sleep(self._stall_seconds)
                raise httpx.ReadTimeout("read timed out", request=request)
        return await self._inner.handle_async_request(request)


def test_timed_out_request_is_retried_within_fetch_deadline():
    transport = _FirstPoolRequestTimesOut(stall_seconds=0.2)
    client = JeopardyApiClient(
        "http://testserver/api",
        timeout=0.2,
        max_retries=2,
        transport=transport,
        retry_wait_seconds=0,
    )
    controller = GameSessionController(
        client,
        RecordingPresenter(),
        fetch_timeout=client.deadline,
        sampler=RandomSampler(random.Random(3)),
    )

    assert asyncio.run(controller.start_or_restart()) is True
    assert controller.state is SessionState.READY
    assert transport.pool_requests == 2
