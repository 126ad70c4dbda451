"""The full board of categories and clues for one game."""

from __future__ import annotations

from typing import Iterator, Sequence

from jeopardy_app.core.errors import (
    IndexOutOfRange,
    InsufficientClues,
    InvalidCategoryData,
    InvalidSampleSize,
)
from jeopardy_app.core.models import Category, CategoryDetail, Clue, RawClue
from jeopardy_app.core.random_sampler import RandomSampler


class CategorySet:
    """
    A fixed-shape board: ``num_categories`` columns of ``clues_per_category`` clues.

    The shape never changes after :meth:`build`. Individual clues stay mutable
    so their reveal state can be advanced through :meth:`clue_at`. A restart
    builds a brand new instance instead of touching this one, which keeps reveal
    state from one game out of the next.
    """

    def __init__(self, categories: Sequence[Category], generation: int = 0) -> None:
        self._categories = tuple(categories)
        self._generation = generation
        if not self._categories:
            raise InvalidCategoryData("A board needs at least one category.")
        expected = len(self._categories[0].clues)
        for category in self._categories:
            if len(category.clues) != expected:
                raise InvalidCategoryData(
                    f"Category '{category.title}' has {len(category.clues)} clues, expected {expected}."
                )

    @classmethod
    def build(
        cls,
        details: Sequence[CategoryDetail],
        clues_per_category: int,
        sampler: RandomSampler | None = None,
        generation: int = 0,
    ) -> "CategorySet":
        """
        Sample clues for every fetched category and return a fresh board.

        Args:
            details: Categories as returned by the category service, in column order.
            clues_per_category: Board height.
            sampler: Random source for clue selection; a fresh one if omitted.
            generation: Tag of the build attempt that produced this board.

        Raises:
            InsufficientClues: A category has fewer usable clues than required.
            InvalidCategoryData: A category title is blank.
        """
        sampler = sampler or RandomSampler()
        categories = [
            cls._build_category(detail, clues_per_category, sampler) for detail in details
        ]
        return cls(categories, generation=generation)

    @staticmethod
    def _build_category(
        detail: CategoryDetail, clues_per_category: int, sampler: RandomSampler
    ) -> Category:
        title = (detail.title or "").strip()
        if not title:
            raise InvalidCategoryData(f"Category {detail.id} has no title.")

        usable = [raw for raw in detail.raw_clues if _is_usable(raw)]
        try:
            selected = sampler.sample(usable, clues_per_category)
        except InvalidSampleSize as exc:
            raise InsufficientClues(title, len(usable), clues_per_category) from exc

        clues = tuple(
            Clue(question=raw.question.strip(), answer=raw.answer.strip()) for raw in selected
        )
        return Category(title=title, clues=clues)

    def clue_at(self, category_index: int, clue_index: int) -> Clue:
        """Return the live clue at ``(category_index, clue_index)``."""
        if not (0 <= category_index < len(self._categories)):
            raise IndexOutOfRange(category_index, clue_index)
        clues = self._categories[category_index].clues
        if not (0 <= clue_index < len(clues)):
            raise IndexOutOfRange(category_index, clue_index)
        return clues[clue_index]

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    @property
    def titles(self) -> list[str]:
        return [category.title for category in self._categories]

    @property
    def num_categories(self) -> int:
        return len(self._categories)

    @property
    def clues_per_category(self) -> int:
        return len(self._categories[0].clues)

    @property
    def generation(self) -> int:
        return self._generation

    def all_clues(self) -> list[Clue]:
        return [clue for category in self._categories for clue in category.clues]

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)


def _is_usable(raw: RawClue) -> bool:
    return bool((raw.question or "").strip()) and bool((raw.answer or "").strip())
