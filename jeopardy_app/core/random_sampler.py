"""Uniform sampling without replacement with an injectable random source."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from jeopardy_app.core.errors import InvalidSampleSize

T = TypeVar("T")


class RandomSampler:
    """Draws distinct items from a sequence.

    Pass a seeded ``random.Random`` (or call :meth:`seed`) to make draws
    reproducible in tests.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def sample(self, items: Sequence[T], k: int) -> list[T]:
        """Return ``k`` items taken from distinct positions of ``items``."""
        if k < 0 or k > len(items):
            raise InvalidSampleSize(k, len(items))
        return self._rng.sample(list(items), k)
