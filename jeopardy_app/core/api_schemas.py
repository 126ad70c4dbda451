"""Wire format of the Jeopardy category service.

The same models validate responses in the HTTP client and shape responses in
the local clue server, so both sides agree on one format.
"""

from __future__ import annotations

from pydantic import BaseModel

from jeopardy_app.core.models import CategoryDetail, RawClue


class CategorySummaryPayload(BaseModel):
    """Entry of ``GET /categories``."""

    id: int
    title: str
    clues_count: int | None = None


class CluePayload(BaseModel):
    """Clue entry inside ``GET /category``."""

    id: int | None = None
    question: str | None = None
    answer: str | None = None
    value: int | None = None
    category_id: int | None = None


class CategoryPayload(BaseModel):
    """Body of ``GET /category``."""

    id: int
    title: str
    clues_count: int | None = None
    clues: list[CluePayload] = []

    def to_detail(self) -> CategoryDetail:
        return CategoryDetail(
            id=self.id,
            title=self.title,
            raw_clues=[
                RawClue(question=clue.question or "", answer=clue.answer or "")
                for clue in self.clues
            ],
        )
