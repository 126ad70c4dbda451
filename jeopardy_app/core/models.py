"""Domain models for the trivia board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RevealState(Enum):
    """What a clue cell currently shows."""

    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


class SessionState(Enum):
    """Lifecycle of a game session."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(slots=True)
class Clue:
    """A question/answer pair on the board together with its reveal state."""

    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN


@dataclass(frozen=True, slots=True)
class Category:
    """One board column: a title and a fixed, ordered run of clues."""

    title: str
    clues: tuple[Clue, ...]


@dataclass(frozen=True, slots=True)
class RawClue:
    """Clue text as delivered by the category service."""

    question: str
    answer: str


@dataclass(frozen=True, slots=True)
class CategoryDetail:
    """A category as delivered by the category service, before sampling."""

    id: int
    title: str
    raw_clues: list[RawClue] = field(default_factory=list)
