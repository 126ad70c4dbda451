"""Service orchestrating one trivia game from category fetch to clue reveals."""

from __future__ import annotations

import asyncio
import logging
from threading import Lock, Thread
from typing import Protocol

from jeopardy_app.constants.board_constants import CLUES_PER_CATEGORY, NUM_CATEGORIES
from jeopardy_app.constants.network_constants import CATEGORY_POOL_SIZE, FETCH_DEADLINE_SECONDS
from jeopardy_app.core.category_set import CategorySet
from jeopardy_app.core.clue_state import ClueStateMachine
from jeopardy_app.core.errors import (
    IndexOutOfRange,
    RemoteServiceUnavailable,
    SessionStartFailed,
)
from jeopardy_app.core.models import CategoryDetail, SessionState
from jeopardy_app.core.random_sampler import RandomSampler

logger = logging.getLogger(__name__)


class CategorySource(Protocol):
    """Remote collaborator that knows the category pool and category contents."""

    async def fetch_category_ids(self, pool_size: int) -> list[int]: ...

    async def fetch_category_detail(self, category_id: int) -> CategoryDetail: ...


class BoardPresenter(Protocol):
    """Presentation layer notified by the session.

    Callbacks may be invoked from the thread running the build, so
    implementations that own widgets must hop back to their GUI thread.
    """

    def on_session_state_changed(
        self, state: SessionState, error: SessionStartFailed | None
    ) -> None: ...

    def render(self, category_set: CategorySet) -> None: ...


class _NullPresenter:
    def on_session_state_changed(
        self, state: SessionState, error: SessionStartFailed | None
    ) -> None:
        pass

    def render(self, category_set: CategorySet) -> None:
        pass


class GameSessionController:
    """Owns the current board and drives ``IDLE -> LOADING -> READY | FAILED``.

    Only one build runs at a time: a restart requested while ``LOADING`` is
    ignored. Every build attempt carries a generation number and its result is
    only applied while that number is still the current one.
    """

    def __init__(
        self,
        source: CategorySource,
        presenter: BoardPresenter | None = None,
        *,
        num_categories: int = NUM_CATEGORIES,
        clues_per_category: int = CLUES_PER_CATEGORY,
        category_pool_size: int = CATEGORY_POOL_SIZE,
        fetch_timeout: float | None = FETCH_DEADLINE_SECONDS,
        sampler: RandomSampler | None = None,
    ) -> None:
        self._lock = Lock()
        self._source = source
        self._presenter: BoardPresenter = presenter or _NullPresenter()
        self._num_categories = num_categories
        self._clues_per_category = clues_per_category
        self._category_pool_size = category_pool_size
        self._fetch_timeout = fetch_timeout
        self._sampler = sampler or RandomSampler()

        self._state = SessionState.IDLE
        self._generation = 0
        self._category_set: CategorySet | None = None
        self._last_error: SessionStartFailed | None = None

    # --- Wiring & settings ---

    def attach_presenter(self, presenter: BoardPresenter) -> None:
        self._presenter = presenter

    def set_seed(self, seed: int | None) -> None:
        with self._lock:
            self._sampler.seed(seed)

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def category_set(self) -> CategorySet | None:
        with self._lock:
            return self._category_set

    @property
    def last_error(self) -> SessionStartFailed | None:
        with self._lock:
            return self._last_error

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    # --- Session lifecycle ---

    async def start_or_restart(self) -> bool:
        """Build a new board and make it current.

        Returns True when the new board was applied, False when the request was
        collapsed into a build already in flight, failed, or went stale.
        """
        with self._lock:
            if self._state is SessionState.LOADING:
                logger.info("Restart ignored: board generation %d is still loading", self._generation)
                return False
            self._generation += 1
            generation = self._generation
            self._state = SessionState.LOADING
            self._last_error = None

        logger.info("Loading board generation %d", generation)
        self._presenter.on_session_state_changed(SessionState.LOADING, None)

        try:
            category_set = await self._build_category_set(generation)
        except SessionStartFailed as error:
            self._fail(generation, error)
            return False

        with self._lock:
            if generation != self._generation:
                logger.warning(
                    "Discarding stale board generation %d (current is %d)",
                    generation,
                    self._generation,
                )
                return False
            self._category_set = category_set
            self._state = SessionState.READY

        logger.info(
            "Board generation %d ready: %s", generation, ", ".join(category_set.titles)
        )
        self._presenter.render(category_set)
        self._presenter.on_session_state_changed(SessionState.READY, None)
        return True

    def on_restart_requested(self) -> Thread | None:
        """Run :meth:`start_or_restart` on a background daemon thread."""
        if self.state is SessionState.LOADING:
            logger.info("Restart ignored: a board is already loading")
            return None

        def run_build() -> None:
            asyncio.run(self.start_or_restart())

        thread = Thread(target=run_build, name="BoardLoader", daemon=True)
        thread.start()
        return thread

    def on_cell_activated(self, category_index: int, clue_index: int) -> str | None:
        """Advance the clue at the given coordinate and return its new cell text."""
        with self._lock:
            if self._state is not SessionState.READY or self._category_set is None:
                logger.info(
                    "Ignoring activation of (%d, %d) while %s",
                    category_index,
                    clue_index,
                    self._state.value,
                )
                return None
            try:
                clue = self._category_set.clue_at(category_index, clue_index)
            except IndexOutOfRange:
                logger.warning("Ignoring activation outside the board: (%d, %d)", category_index, clue_index)
                return None
            return ClueStateMachine.advance(clue)

    # --- Internals ---

    async def _build_category_set(self, generation: int) -> CategorySet:
        try:
            return await self._fetch_and_build(generation)
        except Exception as exc:
            raise SessionStartFailed(f"Could not start a game: {exc}") from exc

    async def _fetch_and_build(self, generation: int) -> CategorySet:
        pool = await self._with_timeout(
            self._source.fetch_category_ids(self._category_pool_size),
            "category pool",
        )
        unique_ids = list(dict.fromkeys(pool))
        with self._lock:
            chosen_ids = self._sampler.sample(unique_ids, self._num_categories)
        logger.debug("Generation %d picked categories %s", generation, chosen_ids)

        details = await asyncio.gather(
            *(
                self._with_timeout(
                    self._source.fetch_category_detail(category_id),
                    f"category {category_id}",
                )
                for category_id in chosen_ids
            )
        )

        with self._lock:
            return CategorySet.build(
                details,
                self._clues_per_category,
                sampler=self._sampler,
                generation=generation,
            )

    async def _with_timeout(self, awaitable, label: str):
        try:
            return await asyncio.wait_for(awaitable, timeout=self._fetch_timeout)
        except asyncio.TimeoutError as exc:
            raise RemoteServiceUnavailable(
                f"Timed out after {self._fetch_timeout}s fetching {label}."
            ) from exc

    def _fail(self, generation: int, error: SessionStartFailed) -> None:
        with self._lock:
            if generation != self._generation:
                logger.warning("Ignoring failure of stale board generation %d: %s", generation, error)
                return
            self._state = SessionState.FAILED
            self._last_error = error
        logger.error("Board generation %d failed: %s", generation, error, exc_info=error.__cause__)
        self._presenter.on_session_state_changed(SessionState.FAILED, error)
